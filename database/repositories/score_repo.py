"""Reads and upserts for league.scores."""

from typing import List

from models import PlayerScore, RoundScore, ScoreUpdate, SeasonScore
from database.converters import (
    player_score_from_row,
    round_score_from_row,
    score_update_to_row,
    season_score_from_row,
)
from database.repositories.base import BaseRepositoryDB


class ScoreRepositoryDB(BaseRepositoryDB):
    """Async reads and the single write path for scores."""

    # ================================================================
    # Read
    # ================================================================

    async def get_scores_for_round(self, round_id: str) -> List[RoundScore]:
        async with self._connection() as conn:
            rows = await conn.fetch(
                """SELECT s.*, p.name AS player_name
                   FROM league.scores s
                   LEFT JOIN league.players p ON p.id = s.player_id
                   WHERE s.round_id = $1
                   ORDER BY p.name COLLATE "und-x-icu", s.player_id""",
                round_id,
            )
            return [round_score_from_row(r) for r in rows]

    async def get_scores_for_season(self, season_id: str) -> List[SeasonScore]:
        async with self._connection() as conn:
            rows = await conn.fetch(
                """SELECT s.*, p.name AS player_name,
                          r.week AS round_week, r.round_date AS round_date
                   FROM league.scores s
                   JOIN league.rounds r ON r.id = s.round_id
                   LEFT JOIN league.players p ON p.id = s.player_id
                   WHERE r.season_id = $1
                   ORDER BY r.round_date, r.week, r.id, p.name COLLATE "und-x-icu", s.player_id""",
                season_id,
            )
            return [season_score_from_row(r) for r in rows]

    async def get_recent_scores_for_player(
        self, player_id: str, limit: int = 3
    ) -> List[PlayerScore]:
        """A player's scores, most recent round first."""
        async with self._connection() as conn:
            rows = await conn.fetch(
                """SELECT s.*, r.week AS round_week, r.round_date AS round_date
                   FROM league.scores s
                   JOIN league.rounds r ON r.id = s.round_id
                   WHERE s.player_id = $1
                   ORDER BY r.round_date DESC, r.week DESC
                   LIMIT $2""",
                player_id, limit,
            )
            return [player_score_from_row(r) for r in rows]

    # ================================================================
    # Upsert
    # ================================================================

    async def upsert_scores(self, round_id: str, updates: List[ScoreUpdate]) -> None:
        """Overwrite the (round, player) score in place, or insert it.

        No validation happens here; the caller checks roster membership and
        stroke ranges first. There is no unique constraint on (round, player),
        so the update-then-insert pair keeps at most one row per key.
        """
        async with self._connection() as conn:
            async with conn.transaction():
                for update in updates:
                    result = await conn.execute(
                        """UPDATE league.scores
                           SET gross = $3, net = $4
                           WHERE round_id = $1 AND player_id = $2""",
                        round_id, update.player_id, update.gross, update.net,
                    )
                    if result != "UPDATE 0":
                        continue
                    await conn.execute(
                        """INSERT INTO league.scores (id, round_id, player_id, gross, net)
                           VALUES ($1, $2, $3, $4, $5)""",
                        *score_update_to_row(update, round_id),
                    )
