"""Round-over-round leaderboard movement.

Movement compares the current leaderboard with the leaderboard built from
scores up to and including the second-to-last round in date order. The cutoff
is positional: a later round that is only partly scored still moves the
comparison point forward.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from models.player import Player
from models.round import Round
from models.score import Score
from models.standing import LeaderboardEntry, StandingRow
from analytics.standings import compute_standings, rank_positions, rank_standings

NEW_MARKER = "NEW"
NO_CHANGE_MARKER = "—"


def chronological(rounds: Iterable[Round]) -> List[Round]:
    return sorted(rounds, key=lambda r: r.sort_key)


def previous_cutoff_round(rounds: Iterable[Round]) -> Optional[Round]:
    """The second-to-last round by date, or None with fewer than two rounds."""
    ordered = chronological(rounds)
    if len(ordered) < 2:
        return None
    return ordered[-2]


def scores_through_round(
    rounds: Iterable[Round], scores: Iterable[Score], cutoff: Round
) -> List[Score]:
    """Scores whose round sits at or before ``cutoff`` in chronological order."""
    position = {r.id: index for index, r in enumerate(chronological(rounds))}
    cutoff_index = position.get(cutoff.id)
    if cutoff_index is None:
        return []
    return [
        score for score in scores
        if score.round_id in position and position[score.round_id] <= cutoff_index
    ]


def previous_ranks(
    players: Sequence[Player], rounds: Sequence[Round], scores: Sequence[Score]
) -> Dict[str, int]:
    """Rank by player as of the previous cutoff. Empty when there is no cutoff."""
    cutoff = previous_cutoff_round(rounds)
    if cutoff is None:
        return {}
    earlier = scores_through_round(rounds, scores, cutoff)
    return rank_positions(rank_standings(compute_standings(players, earlier)))


def compute_movement(
    rounds: Sequence[Round],
    scores: Sequence[Score],
    players: Sequence[Player],
    current_leaderboard: Sequence[StandingRow],
) -> Dict[str, Optional[int]]:
    """Map player_id -> previous rank minus current rank (None means NEW).

    ``current_leaderboard`` must already be in ranked order.
    """
    before = previous_ranks(players, rounds, scores)
    movement: Dict[str, Optional[int]] = {}
    for current_rank, row in enumerate(current_leaderboard, start=1):
        previous_rank = before.get(row.player_id)
        movement[row.player_id] = (
            None if previous_rank is None else previous_rank - current_rank
        )
    return movement


def format_movement(movement: Optional[int]) -> str:
    if movement is None:
        return NEW_MARKER
    if movement > 0:
        return f"+{movement}"
    if movement < 0:
        return str(movement)
    return NO_CHANGE_MARKER


def build_leaderboard(
    players: Sequence[Player], rounds: Sequence[Round], scores: Sequence[Score]
) -> List[LeaderboardEntry]:
    """Full standings pipeline: aggregate, rank, then attach movement."""
    ranked = rank_standings(compute_standings(players, scores))
    movement = compute_movement(rounds, scores, players, ranked)
    return [
        LeaderboardEntry(
            **row.model_dump(),
            rank=index,
            movement=movement[row.player_id],
            movement_text=format_movement(movement[row.player_id]),
        )
        for index, row in enumerate(ranked, start=1)
    ]
