from __future__ import annotations

from typing import List, Optional

import asyncpg

from models import Player, PlayerScore, Round, RoundScore, Season, ScoreUpdate, SeasonScore
from database.repositories import (
    PlayerRepositoryDB,
    RoundRepositoryDB,
    ScoreRepositoryDB,
    SeasonRepositoryDB,
)
from database.repositories.base import CONNECTION_ERRORS


class DatabaseManager:
    """
    PostgreSQL-backed LeagueRepository.

    Notes:
    - Composes one asyncpg repository per table group, all sharing a pool.
    - Raw SQL (no ORM) to keep behavior explicit.
    """

    name = "database"

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool
        self.seasons = SeasonRepositoryDB(pool)
        self.players = PlayerRepositoryDB(pool)
        self.rounds = RoundRepositoryDB(pool)
        self.scores = ScoreRepositoryDB(pool)

    async def health_check(self) -> bool:
        """Test connectivity with SELECT 1."""
        try:
            async with self._pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except CONNECTION_ERRORS:
            return False

    async def get_latest_season(self) -> Optional[Season]:
        return await self.seasons.get_latest_season()

    async def get_season(self, season_id: str) -> Optional[Season]:
        return await self.seasons.get_season(season_id)

    async def get_players(self) -> List[Player]:
        return await self.players.get_players()

    async def get_players_for_season(self, season_id: str) -> List[Player]:
        return await self.players.get_players_for_season(season_id)

    async def get_player(self, player_id: str) -> Optional[Player]:
        return await self.players.get_player(player_id)

    async def get_rounds_for_season(self, season_id: str) -> List[Round]:
        return await self.rounds.get_rounds_for_season(season_id)

    async def get_round(self, round_id: str) -> Optional[Round]:
        return await self.rounds.get_round(round_id)

    async def get_scores_for_season(self, season_id: str) -> List[SeasonScore]:
        return await self.scores.get_scores_for_season(season_id)

    async def get_scores_for_round(self, round_id: str) -> List[RoundScore]:
        return await self.scores.get_scores_for_round(round_id)

    async def get_recent_scores_for_player(self, player_id: str, limit: int = 3) -> List[PlayerScore]:
        return await self.scores.get_recent_scores_for_player(player_id, limit)

    async def upsert_scores(self, round_id: str, updates: List[ScoreUpdate]) -> None:
        await self.scores.upsert_scores(round_id, updates)
