# =============================================================================
# File: roster/store.py
# Purpose: Flat-file member store (one name per line) behind a small interface.
# =============================================================================
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List

from .errors import StorageError

logger = logging.getLogger(__name__)

DELIMITER = "\n"


class MemberStore(ABC):
    """Read and rewrite the persisted list of member names."""

    @abstractmethod
    def exists(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def load_all(self) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def append(self, name: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def replace_all(self, names: Iterable[str]) -> None:
        raise NotImplementedError


def split_names(content: str) -> List[str]:
    """
    Split stored content into names.

    Trailing empty tokens are dropped, so "Anja\\nMaren\\n" and "Anja\\nMaren"
    both give ["Anja", "Maren"]. Interior blanks and whitespace are kept.
    """
    names = content.split(DELIMITER)
    while names and names[-1] == "":
        names.pop()
    return names


class FileMemberStore(MemberStore):
    """MemberStore backed by a newline-delimited text file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"FileMemberStore({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.exists()

    def load_all(self) -> List[str]:
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8", newline="") as f:
                content = f.read()
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        return split_names(content)

    def append(self, name: str) -> None:
        """Append one name, adding a separating newline when needed."""
        try:
            needs_delimiter = False
            if self.path.exists() and self.path.stat().st_size > 0:
                with self.path.open("rb") as f:
                    f.seek(-1, 2)
                    needs_delimiter = f.read(1) != DELIMITER.encode()

            with self.path.open("a", encoding="utf-8", newline="") as f:
                if needs_delimiter:
                    f.write(DELIMITER)
                f.write(name)
        except OSError as e:
            raise StorageError(f"Cannot append to {self.path}: {e}") from e
        logger.debug("Appended %r to %s", name, self.path)

    def replace_all(self, names: Iterable[str]) -> None:
        content = DELIMITER.join(names)
        try:
            with self.path.open("w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e
        logger.debug("Rewrote %s (%d bytes)", self.path, len(content))
