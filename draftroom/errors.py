"""Exception hierarchy for the evaluation and draft engine."""

from typing import Optional


class DraftroomError(Exception):
    """Base exception for draftroom errors."""
    pass


class ValidationError(DraftroomError):
    """Raised when input is missing or malformed (no snapshot, bad needs config)."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DraftroomError):
    """Raised when a player, session or role id is unknown."""

    def __init__(self, message: str, entity: Optional[str] = None, entity_id: Optional[str] = None):
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id


class ComputationError(DraftroomError):
    """Raised for internal inconsistencies, e.g. an empty candidate pool."""
    pass
