# =============================================================================
# File: roster/seed.py
# Purpose: Load data/members.yml → initial content of the member store
# =============================================================================
from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .store import MemberStore

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).resolve().parent / "data" / "members.yml"


def load_seed_names(path: str | Path) -> list[str]:
    """
    Read the list of names from a seed file.

    Expected format:
        members:
          - Anja
          - Maren
    A missing file or an empty/invalid document gives []. Empty and
    duplicate names are dropped.
    """
    path = Path(path)
    if not path.exists():
        return []

    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        logger.warning("%s must contain a top-level mapping, ignoring it", path)
        return []

    entries = raw.get("members") or []
    if not isinstance(entries, list):
        logger.warning("%s: 'members' must be a list, ignoring it", path)
        return []

    names: list[str] = []
    for entry in entries:
        if entry is None:
            continue
        # Unquoted names like 1984 load as int
        name = str(entry)
        if name == "" or name in names:
            logger.warning("%s: skipping empty or duplicate member %r", path, name)
            continue
        names.append(name)
    return names


def seed_members_from_yaml(
    store: MemberStore, path: str | Path = DEFAULT_SEED_FILE, force: bool = False
) -> int:
    """
    Write the seed names into the store.

    Only runs when the store has no persisted state yet, unless force is set.
    Returns the number of names written (0 when skipped).
    """
    if store.exists() and not force:
        logger.debug("Member store already exists, skipping seed")
        return 0

    names = load_seed_names(path)
    if not names:
        logger.debug("No seed members found in %s", path)
        return 0

    store.replace_all(names)
    logger.info("Seeded %d members from %s", len(names), path)
    return len(names)
