# roster/services/members.py
"""
Member use cases.

Each function loads the roster fresh from the store, applies one action and
writes the full result back. Nothing is cached between calls.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from roster.errors import MemberNotFound
from roster.models import Member, members_from_names
from roster.store import MemberStore
from roster.validators import MemberValidator, ValidationResult

logger = logging.getLogger(__name__)

MutationResult = Tuple[Member, ValidationResult]


def list_members(store: MemberStore) -> List[Member]:
    return members_from_names(store.load_all())


def find_member(store: MemberStore, member_id: str) -> Optional[Member]:
    """Return the first member whose id matches, or None."""
    for member in list_members(store):
        if member.id == member_id:
            return member
    return None


def get_member(store: MemberStore, member_id: str) -> Member:
    member = find_member(store, member_id)
    if member is None:
        raise MemberNotFound(member_id)
    return member


def create_member(store: MemberStore, name: Optional[str]) -> MutationResult:
    """Validate a new member and append it when valid."""
    member = Member(name)
    result = MemberValidator(member, list_members(store)).validate()
    if not result.valid:
        logger.info("Rejected new member %r: %s", member.name, result.messages)
        return member, result

    store.append(member.name)
    logger.info("Created member %r", member.name)
    return member, result


def update_member(
    store: MemberStore, member_id: str, name: Optional[str]
) -> MutationResult:
    """
    Rename the member identified by member_id.

    Raises MemberNotFound when member_id is not in the roster. When the
    roster holds member_id more than once, the first entry is renamed.
    """
    names = store.load_all()
    if member_id not in names:
        raise MemberNotFound(member_id)

    member = Member(name)
    result = MemberValidator(
        member, members_from_names(names), previous_id=member_id
    ).validate()
    if not result.valid:
        logger.info("Rejected update of %r: %s", member_id, result.messages)
        return member, result

    names[names.index(member_id)] = member.name
    store.replace_all(names)
    logger.info("Renamed member %r to %r", member_id, member.name)
    return member, result


def remove_member(store: MemberStore, member_id: str) -> int:
    """Remove every entry equal to member_id. Returns how many were removed."""
    names = store.load_all()
    remaining = [name for name in names if name != member_id]
    removed = len(names) - len(remaining)
    if not removed:
        # Leave a missing store file missing
        return 0

    store.replace_all(remaining)
    logger.info("Removed member %r (%d entries)", member_id, removed)
    return removed
