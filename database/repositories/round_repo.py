"""Reads for league.rounds."""

from typing import List, Optional

from models import Round
from database.converters import round_from_row
from database.repositories.base import BaseRepositoryDB


class RoundRepositoryDB(BaseRepositoryDB):
    """Async reads for rounds."""

    async def get_round(self, round_id: str) -> Optional[Round]:
        async with self._connection() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM league.rounds WHERE id = $1", round_id
            )
            return round_from_row(row) if row else None

    async def get_rounds_for_season(self, season_id: str) -> List[Round]:
        """A season's rounds in date order."""
        async with self._connection() as conn:
            rows = await conn.fetch(
                """SELECT * FROM league.rounds
                   WHERE season_id = $1
                   ORDER BY round_date, week, id""",
                season_id,
            )
            return [round_from_row(r) for r in rows]
