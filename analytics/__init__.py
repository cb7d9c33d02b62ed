from .standings import compute_standings, rank_standings, ranking_key
from .movement import build_leaderboard, compute_movement, format_movement
from .summary import (
    current_leader,
    lowest_round,
    round_leaderboard,
    round_progress,
    rounds_remaining,
)

__all__ = [
    "compute_standings",
    "rank_standings",
    "ranking_key",
    "compute_movement",
    "format_movement",
    "build_leaderboard",
    "round_progress",
    "rounds_remaining",
    "lowest_round",
    "current_leader",
    "round_leaderboard",
]
