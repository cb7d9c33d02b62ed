"""Reads for league.players and the season roster."""

from typing import List, Optional

from models import Player
from database.converters import player_from_row
from database.repositories.base import BaseRepositoryDB


class PlayerRepositoryDB(BaseRepositoryDB):
    """Async reads for players and season rosters."""

    async def get_player(self, player_id: str) -> Optional[Player]:
        async with self._connection() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM league.players WHERE id = $1", player_id
            )
            return player_from_row(row) if row else None

    async def get_players(self) -> List[Player]:
        """All players, name ascending (ICU root collation)."""
        async with self._connection() as conn:
            rows = await conn.fetch(
                """SELECT * FROM league.players ORDER BY name COLLATE "und-x-icu", id"""
            )
            return [player_from_row(r) for r in rows]

    async def get_players_for_season(self, season_id: str) -> List[Player]:
        """Roster for a season, name ascending. Unknown seasons yield []."""
        async with self._connection() as conn:
            rows = await conn.fetch(
                """SELECT p.*
                   FROM league.players p
                   JOIN league.season_players sp ON sp.player_id = p.id
                   WHERE sp.season_id = $1
                   ORDER BY p.name COLLATE "und-x-icu", p.id""",
                season_id,
            )
            return [player_from_row(r) for r in rows]
