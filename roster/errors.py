# roster/errors.py


class RosterError(Exception):
    """Base error for the roster application."""


class StorageError(RosterError):
    """Reading or writing the persisted member list failed."""


class MemberNotFound(RosterError, LookupError):
    """No member carries the requested identifier."""

    def __init__(self, member_id: str):
        super().__init__(f"No member named {member_id!r}")
        self.member_id = member_id
