"""Reads for the league.seasons table."""

from typing import Optional

from models import Season
from database.converters import season_from_row
from database.repositories.base import BaseRepositoryDB


class SeasonRepositoryDB(BaseRepositoryDB):
    """Async reads for seasons. Seasons are provisioned by the seed script."""

    async def get_season(self, season_id: str) -> Optional[Season]:
        async with self._connection() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM league.seasons WHERE id = $1", season_id
            )
            return season_from_row(row) if row else None

    async def get_latest_season(self) -> Optional[Season]:
        """Season with the latest start date; a missing start date counts as the epoch."""
        async with self._connection() as conn:
            row = await conn.fetchrow(
                """SELECT * FROM league.seasons
                   ORDER BY COALESCE(start_date, DATE '1970-01-01') DESC, id
                   LIMIT 1"""
            )
            return season_from_row(row) if row else None
