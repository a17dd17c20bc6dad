"""Storage interfaces and in-memory implementations."""

from draftroom.stores.base import AttributeStore, DraftContextStore, EvaluationStore
from draftroom.stores.memory import (
    InMemoryAttributeStore,
    InMemoryDraftContextStore,
    InMemoryEvaluationStore,
)

__all__ = [
    "AttributeStore",
    "DraftContextStore",
    "EvaluationStore",
    "InMemoryAttributeStore",
    "InMemoryDraftContextStore",
    "InMemoryEvaluationStore",
]
