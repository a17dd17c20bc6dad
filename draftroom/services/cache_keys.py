"""Cache key builders shared by the services that read and invalidate them."""

ALL_EVALUATIONS = "evaluations:all"
EVALUATION_PATTERN = "evaluation:player:*"
DRAFT_BOARD_PATTERN = "draft_board:round:*"


def evaluation(player_id: str) -> str:
    return f"evaluation:player:{player_id}"


def recommendations(session_id: str, round: int, pick: int) -> str:
    return f"recommendations:session:{session_id}:round:{round}:pick:{pick}"


def session_recommendations(session_id: str) -> str:
    """Pattern matching every recommendation key of a session."""
    return f"recommendations:session:{session_id}:*"


def draft_board(round: int) -> str:
    return f"draft_board:round:{round}"
