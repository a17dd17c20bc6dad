"""Core engine models."""

from draftroom.core.models.draft import (
    DraftHistoryEntry,
    DraftPick,
    DraftSession,
    Recommendation,
    SessionStatus,
)
from draftroom.core.models.evaluation import PlayerEvaluation, ViablePosition

__all__ = [
    "DraftHistoryEntry",
    "DraftPick",
    "DraftSession",
    "PlayerEvaluation",
    "Recommendation",
    "SessionStatus",
    "ViablePosition",
]
