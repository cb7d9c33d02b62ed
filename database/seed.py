"""Provision a PostgreSQL league store from a dataset dict."""

from pathlib import Path
from typing import Any, Dict

import asyncpg

from models import Player, Round, Score, Season
from database.converters import player_to_row, round_to_row, score_to_row, season_to_row

SCHEMA_PATH = Path(__file__).with_name("schema.sql")


async def initialize_schema(pool: asyncpg.Pool) -> None:
    """Create schemas/tables defined in `database/schema.sql`."""
    sql_text = SCHEMA_PATH.read_text(encoding="utf-8")
    async with pool.acquire() as conn:
        await conn.execute(sql_text)


async def seed_league(pool: asyncpg.Pool, data: Dict[str, Any]) -> Dict[str, int]:
    """Upsert seasons, players, roster links, rounds and scores by id.

    Returns the number of rows written per table.
    """
    seasons = [Season.model_validate(s) for s in data.get("seasons", [])]
    players = [Player.model_validate(p) for p in data.get("players", [])]
    rounds = [Round.model_validate(r) for r in data.get("rounds", [])]
    scores = [Score.model_validate(s) for s in data.get("scores", [])]
    roster = [(link["season_id"], link["player_id"]) for link in data.get("season_players", [])]

    async with pool.acquire() as conn:
        async with conn.transaction():
            await conn.executemany(
                """INSERT INTO league.seasons (id, name, start_date, end_date)
                   VALUES ($1, $2, $3, $4)
                   ON CONFLICT (id) DO UPDATE
                   SET name = EXCLUDED.name,
                       start_date = EXCLUDED.start_date,
                       end_date = EXCLUDED.end_date""",
                [season_to_row(s) for s in seasons],
            )
            await conn.executemany(
                """INSERT INTO league.players (id, name, email, handicap_index)
                   VALUES ($1, $2, $3, $4)
                   ON CONFLICT (id) DO UPDATE
                   SET name = EXCLUDED.name,
                       email = EXCLUDED.email,
                       handicap_index = EXCLUDED.handicap_index""",
                [player_to_row(p) for p in players],
            )
            await conn.executemany(
                """INSERT INTO league.season_players (season_id, player_id)
                   VALUES ($1, $2)
                   ON CONFLICT DO NOTHING""",
                roster,
            )
            await conn.executemany(
                """INSERT INTO league.rounds
                   (id, season_id, week, round_date, course, tee_time,
                    player_count, confirmation_number)
                   VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
                   ON CONFLICT (id) DO UPDATE
                   SET week = EXCLUDED.week,
                       round_date = EXCLUDED.round_date,
                       course = EXCLUDED.course,
                       tee_time = EXCLUDED.tee_time,
                       player_count = EXCLUDED.player_count,
                       confirmation_number = EXCLUDED.confirmation_number""",
                [round_to_row(r) for r in rounds],
            )
            await conn.executemany(
                """INSERT INTO league.scores (id, round_id, player_id, gross, net)
                   VALUES ($1, $2, $3, $4, $5)
                   ON CONFLICT (id) DO UPDATE
                   SET gross = EXCLUDED.gross, net = EXCLUDED.net""",
                [score_to_row(s) for s in scores],
            )

    return {
        "seasons": len(seasons),
        "players": len(players),
        "season_players": len(roster),
        "rounds": len(rounds),
        "scores": len(scores),
    }
