"""In-memory LeagueRepository backed by an explicit dataset.

Used when no PostgreSQL store is configured or reachable, and in tests. Each
instance owns its own copy of the data; mutation through ``upsert_scores`` is
not synchronized.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from models import (
    Player,
    PlayerScore,
    Round,
    RoundScore,
    Score,
    ScoreUpdate,
    Season,
    SeasonScore,
    collation_key,
)
from database.converters import score_id_for

SAMPLE_DATA_PATH = Path(__file__).with_name("sample_league.json")


def load_league_data(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read a league dataset (seasons, players, season_players, rounds, scores)."""
    path = Path(path or SAMPLE_DATA_PATH)
    with path.open(encoding="utf-8") as f:
        return json.load(f)


class InMemoryLeagueRepository:
    """LeagueRepository over plain lists, mirroring the SQL ordering rules."""

    name = "memory"

    def __init__(self, data: Optional[Dict[str, Any]] = None) -> None:
        data = copy.deepcopy(data) if data is not None else load_league_data()
        self._seasons = [Season.model_validate(s) for s in data.get("seasons", [])]
        self._players = [Player.model_validate(p) for p in data.get("players", [])]
        self._rounds = [Round.model_validate(r) for r in data.get("rounds", [])]
        self._scores = [Score.model_validate(s) for s in data.get("scores", [])]
        self._roster: Dict[str, List[str]] = {}
        for link in data.get("season_players", []):
            self._roster.setdefault(link["season_id"], []).append(link["player_id"])

    # ================================================================
    # Private helpers
    # ================================================================

    def _player_by_id(self, player_id: str) -> Optional[Player]:
        return next((p for p in self._players if p.id == player_id), None)

    def _round_by_id(self, round_id: str) -> Optional[Round]:
        return next((r for r in self._rounds if r.id == round_id), None)

    def _player_name(self, player_id: str) -> str:
        player = self._player_by_id(player_id)
        return player.name if player else "Unknown"

    # ================================================================
    # Read
    # ================================================================

    async def health_check(self) -> bool:
        return True

    async def get_latest_season(self) -> Optional[Season]:
        by_id = sorted(self._seasons, key=lambda s: s.id)
        ordered = sorted(by_id, key=lambda s: s.sort_start, reverse=True)
        return ordered[0] if ordered else None

    async def get_season(self, season_id: str) -> Optional[Season]:
        return next((s for s in self._seasons if s.id == season_id), None)

    async def get_players(self) -> List[Player]:
        return sorted(self._players, key=lambda p: p.name_key)

    async def get_players_for_season(self, season_id: str) -> List[Player]:
        member_ids = set(self._roster.get(season_id, []))
        return sorted(
            (p for p in self._players if p.id in member_ids),
            key=lambda p: p.name_key,
        )

    async def get_player(self, player_id: str) -> Optional[Player]:
        return self._player_by_id(player_id)

    async def get_rounds_for_season(self, season_id: str) -> List[Round]:
        return sorted(
            (r for r in self._rounds if r.season_id == season_id),
            key=lambda r: r.sort_key,
        )

    async def get_round(self, round_id: str) -> Optional[Round]:
        return self._round_by_id(round_id)

    async def get_scores_for_round(self, round_id: str) -> List[RoundScore]:
        rows = [
            RoundScore(**score.model_dump(), player_name=self._player_name(score.player_id))
            for score in self._scores
            if score.round_id == round_id
        ]
        return sorted(rows, key=lambda s: (collation_key(s.player_name), s.player_id))

    async def get_scores_for_season(self, season_id: str) -> List[SeasonScore]:
        rounds = {r.id: r for r in self._rounds if r.season_id == season_id}
        rows = []
        for score in self._scores:
            round_ = rounds.get(score.round_id)
            if round_ is None:
                continue
            rows.append(
                SeasonScore(
                    **score.model_dump(),
                    player_name=self._player_name(score.player_id),
                    round_week=round_.week,
                    round_date=round_.date,
                )
            )
        return sorted(
            rows,
            key=lambda s: (rounds[s.round_id].sort_key, collation_key(s.player_name), s.player_id),
        )

    async def get_recent_scores_for_player(self, player_id: str, limit: int = 3) -> List[PlayerScore]:
        rows = []
        for score in self._scores:
            if score.player_id != player_id:
                continue
            round_ = self._round_by_id(score.round_id)
            if round_ is None:
                continue
            rows.append(
                PlayerScore(**score.model_dump(), round_week=round_.week, round_date=round_.date)
            )
        rows.sort(key=lambda s: (s.round_date, s.round_week), reverse=True)
        return rows[:limit]

    # ================================================================
    # Upsert
    # ================================================================

    async def upsert_scores(self, round_id: str, updates: List[ScoreUpdate]) -> None:
        """Overwrite the (round, player) score in place, or append a new one."""
        for update in updates:
            existing = next(
                (
                    s for s in self._scores
                    if s.round_id == round_id and s.player_id == update.player_id
                ),
                None,
            )
            if existing is not None:
                existing.gross = update.gross
                existing.net = update.net
                continue
            self._scores.append(
                Score(
                    id=score_id_for(round_id, update.player_id),
                    round_id=round_id,
                    player_id=update.player_id,
                    gross=update.gross,
                    net=update.net,
                )
            )
