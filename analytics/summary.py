from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from models.player import Player
from models.round import Round
from models.score import Score, SeasonScore
from models.standing import LeaderboardEntry


def initials(name: str) -> str:
    parts = [part for part in name.split(" ") if part]
    return "".join(part[0] for part in parts)[:2].upper()


def round_progress(
    rounds: Iterable[Round], players: Sequence[Player], scores: Iterable[Score]
) -> List[Dict[str, Any]]:
    """Scores entered vs. roster size for each round."""
    entered_by_round: Dict[str, int] = {}
    for score in scores:
        entered_by_round[score.round_id] = entered_by_round.get(score.round_id, 0) + 1

    total = len(players)
    results: List[Dict[str, Any]] = []
    for round_ in rounds:
        entered = entered_by_round.get(round_.id, 0)
        results.append(
            {
                "round": round_,
                "entered": entered,
                "total": total,
                "is_complete": total > 0 and entered >= total,
                "percent_complete": min(entered / total * 100, 100.0) if total else 0.0,
            }
        )
    return results


def rounds_remaining(progress: Iterable[Dict[str, Any]]) -> int:
    return sum(1 for row in progress if row["entered"] < row["total"])


def lowest_round(scores: Iterable[SeasonScore]) -> Optional[SeasonScore]:
    """Lowest single score of the season, by net where recorded, else gross."""
    best: Optional[SeasonScore] = None
    for score in scores:
        if best is None or score.best_available < best.best_available:
            best = score
    return best


def current_leader(leaderboard: Sequence[LeaderboardEntry]) -> Optional[LeaderboardEntry]:
    """Top of the leaderboard, or None before any score has been entered."""
    if not any(entry.rounds_played for entry in leaderboard):
        return None
    return leaderboard[0]


def round_leaderboard(scores: Iterable[Score]) -> List[Score]:
    """Order one round's scores: by net when every score has one, else by gross."""
    scores = list(scores)
    use_net = bool(scores) and all(score.net is not None for score in scores)
    if use_net:
        return sorted(scores, key=lambda s: s.net)
    return sorted(scores, key=lambda s: s.gross)
