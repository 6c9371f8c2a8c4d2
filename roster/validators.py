# roster/validators.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .models import Member

EMPTY_NAME_MESSAGE = "You need to enter a name"
DUPLICATE_NAME_MESSAGE = "{name} is already included in our list."


@dataclass
class ValidationResult:
    messages: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.messages

    def __bool__(self) -> bool:
        return self.valid


class MemberValidator:
    """
    Check a candidate member against the current roster.

    Rules are evaluated in order and stop at the first failure:
    - the name must not be empty
    - the name must not already be in the roster

    previous_id is the identity the candidate had before an update; entries
    equal to it are ignored by the duplicate check, so saving a member under
    its own name is accepted.
    """

    def __init__(
        self,
        member: Member,
        members: Sequence[Member],
        previous_id: Optional[str] = None,
    ):
        self.member = member
        self.members = members
        self.previous_id = previous_id

    def _other_names(self) -> List[str]:
        return [m.name for m in self.members if m.id != self.previous_id]

    def validate(self) -> ValidationResult:
        name = self.member.name
        if name == "":
            return ValidationResult([EMPTY_NAME_MESSAGE])
        if name in self._other_names():
            return ValidationResult([DUPLICATE_NAME_MESSAGE.format(name=name)])
        return ValidationResult()
