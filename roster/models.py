# =============================================================================
# File: roster/models.py
# Purpose: Member entity. The name doubles as the identifier (no surrogate key).
# =============================================================================
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass
class Member:
    name: Optional[str] = ""

    def __post_init__(self) -> None:
        # Missing form values arrive as None
        self.name = "" if self.name is None else str(self.name)

    @property
    def id(self) -> str:
        return self.name


def members_from_names(names: Iterable[Optional[str]]) -> List[Member]:
    """Build transient Member objects in stored order."""
    return [Member(name) for name in names]
