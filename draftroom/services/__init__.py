"""Services that orchestrate the engine over the stores and cache."""

from draftroom.services.draft_service import DraftBoard, DraftService
from draftroom.services.evaluation_service import BatchEvaluationResult, PlayerEvaluator
from draftroom.services.ranking_service import RankingService
from draftroom.services.recommendation_service import DraftRecommendationService
from draftroom.services.roster_service import RosterService

__all__ = [
    "BatchEvaluationResult",
    "DraftBoard",
    "DraftRecommendationService",
    "DraftService",
    "PlayerEvaluator",
    "RankingService",
    "RosterService",
]
