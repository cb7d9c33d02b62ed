"""Season aggregation: per-player totals and the ranked leaderboard order."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Sequence, Tuple

from models.player import Player
from models.score import Score
from models.standing import StandingRow


class _Totals:
    __slots__ = ("rounds", "gross", "net_sum", "net_count")

    def __init__(self) -> None:
        self.rounds = 0
        self.gross = 0
        self.net_sum = 0
        self.net_count = 0


def compute_standings(players: Sequence[Player], scores: Iterable[Score]) -> List[StandingRow]:
    """Aggregate scores into one StandingRow per roster player, in roster order.

    Every roster player is emitted, including players with no scores.
    Scores for players outside the roster are ignored.
    """
    totals: Dict[str, _Totals] = {player.id: _Totals() for player in players}

    for score in scores:
        current = totals.get(score.player_id)
        if current is None:
            continue
        current.rounds += 1
        current.gross += score.gross
        if score.net is not None:
            current.net_sum += score.net
            current.net_count += 1

    rows: List[StandingRow] = []
    for player in players:
        current = totals[player.id]
        rows.append(
            StandingRow(
                player_id=player.id,
                player_name=player.name,
                rounds_played=current.rounds,
                total_gross=current.gross,
                total_net=current.net_sum if current.net_count > 0 else None,
            )
        )
    return rows


def ranking_key(row: StandingRow) -> Tuple[float, int]:
    """Net ascending with a missing net treated as +inf, then gross ascending."""
    total_net = math.inf if row.total_net is None else row.total_net
    return (total_net, row.total_gross)


def rank_standings(rows: Iterable[StandingRow]) -> List[StandingRow]:
    """Return rows in leaderboard order. Ties keep their input order."""
    return sorted(rows, key=ranking_key)


def rank_positions(rows: Iterable[StandingRow]) -> Dict[str, int]:
    """Map player_id -> 1-based rank for an already ranked sequence."""
    return {row.player_id: index for index, row in enumerate(rows, start=1)}
