"""Store selection: probe PostgreSQL once at startup, fall back to sample data."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from models import Player, PlayerScore, Round, RoundScore, Season, ScoreUpdate, SeasonScore
from database.connection import DatabasePool
from database.db_manager import DatabaseManager
from database.exceptions import StoreUnavailableError
from database.memory import InMemoryLeagueRepository
from database.repository import LeagueRepository
from database.repositories.base import CONNECTION_ERRORS

logger = logging.getLogger(__name__)

FALLBACK_MODES = ("startup", "per-call", "off")


class FallbackLeagueRepository:
    """Serve from ``primary``; on StoreUnavailableError only, serve the same call from ``fallback``.

    Any other exception (bad SQL, constraint violations) propagates unchanged.
    """

    name = "database+fallback"

    def __init__(self, primary: LeagueRepository, fallback: LeagueRepository) -> None:
        self.primary = primary
        self.fallback = fallback

    async def _call(self, method: str, *args):
        try:
            return await getattr(self.primary, method)(*args)
        except StoreUnavailableError as e:
            logger.warning("Store unavailable during %s (%s); serving from fallback data", method, e)
            return await getattr(self.fallback, method)(*args)

    async def health_check(self) -> bool:
        return await self.primary.health_check()

    async def get_latest_season(self) -> Optional[Season]:
        return await self._call("get_latest_season")

    async def get_season(self, season_id: str) -> Optional[Season]:
        return await self._call("get_season", season_id)

    async def get_players(self) -> List[Player]:
        return await self._call("get_players")

    async def get_players_for_season(self, season_id: str) -> List[Player]:
        return await self._call("get_players_for_season", season_id)

    async def get_player(self, player_id: str) -> Optional[Player]:
        return await self._call("get_player", player_id)

    async def get_rounds_for_season(self, season_id: str) -> List[Round]:
        return await self._call("get_rounds_for_season", season_id)

    async def get_round(self, round_id: str) -> Optional[Round]:
        return await self._call("get_round", round_id)

    async def get_scores_for_season(self, season_id: str) -> List[SeasonScore]:
        return await self._call("get_scores_for_season", season_id)

    async def get_scores_for_round(self, round_id: str) -> List[RoundScore]:
        return await self._call("get_scores_for_round", round_id)

    async def get_recent_scores_for_player(self, player_id: str, limit: int = 3) -> List[PlayerScore]:
        return await self._call("get_recent_scores_for_player", player_id, limit)

    async def upsert_scores(self, round_id: str, updates: List[ScoreUpdate]) -> None:
        await self._call("upsert_scores", round_id, updates)


async def open_repository(
    dsn: Optional[str],
    *,
    mode: str = "startup",
    min_size: int = 1,
    max_size: int = 5,
) -> Tuple[LeagueRepository, Optional[DatabasePool]]:
    """Pick the store for this process.

    Returns the repository and the pool that must be closed at shutdown
    (None when the in-memory store is used). With ``mode="off"`` an
    unreachable database raises StoreUnavailableError instead of falling back.
    """
    if mode not in FALLBACK_MODES:
        raise ValueError(f"Unknown fallback mode {mode!r}; expected one of {FALLBACK_MODES}")

    if not dsn:
        if mode == "off":
            raise StoreUnavailableError("DATABASE_URL is not configured")
        logger.info("DATABASE_URL not set; serving the built-in sample league")
        return InMemoryLeagueRepository(), None

    pool = DatabasePool()
    try:
        await pool.initialize(dsn, min_size=min_size, max_size=max_size)
        manager = DatabaseManager(pool.pool)
        reachable = await manager.health_check()
    except CONNECTION_ERRORS as e:
        logger.warning("Could not open database pool: %s", e)
        reachable = False

    if not reachable:
        await pool.close()
        if mode == "off":
            raise StoreUnavailableError("Database is not reachable and fallback is disabled")
        logger.warning("Database unreachable at startup; serving the built-in sample league")
        return InMemoryLeagueRepository(), None

    logger.info("Connected to PostgreSQL league store")
    if mode == "per-call":
        return FallbackLeagueRepository(manager, InMemoryLeagueRepository()), pool
    return manager, pool
