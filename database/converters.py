"""Conversion between asyncpg database rows and Pydantic domain models.

Centralizes all mapping logic between the league schema and the models, so
the asyncpg repositories and the seed script agree on column names.
"""

from typing import Optional

from models import (
    Player,
    PlayerScore,
    Round,
    RoundScore,
    Season,
    Score,
    ScoreUpdate,
    SeasonScore,
)


# ================================================================
# Row -> Model (reads)
# ================================================================

def season_from_row(row) -> Season:
    """league.seasons row -> Season model."""
    return Season(
        id=row["id"],
        name=row["name"],
        start_date=row["start_date"],
        end_date=row["end_date"],
    )


def player_from_row(row) -> Player:
    """league.players row -> Player model (NUMERIC handicap comes back as Decimal)."""
    handicap = row["handicap_index"]
    return Player(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        handicap_index=float(handicap) if handicap is not None else None,
    )


def round_from_row(row) -> Round:
    """league.rounds row -> Round model."""
    return Round(
        id=row["id"],
        season_id=row["season_id"],
        week=row["week"],
        date=row["round_date"],
        course=row["course"],
        tee_time=row["tee_time"],
        player_count=row["player_count"],
        confirmation_number=row["confirmation_number"],
    )


def round_score_from_row(row) -> RoundScore:
    """scores JOIN players row -> RoundScore."""
    return RoundScore(
        id=row["id"],
        round_id=row["round_id"],
        player_id=row["player_id"],
        gross=row["gross"],
        net=row["net"],
        player_name=row["player_name"] or "Unknown",
    )


def season_score_from_row(row) -> SeasonScore:
    """scores JOIN rounds JOIN players row -> SeasonScore."""
    return SeasonScore(
        id=row["id"],
        round_id=row["round_id"],
        player_id=row["player_id"],
        gross=row["gross"],
        net=row["net"],
        player_name=row["player_name"] or "Unknown",
        round_week=row["round_week"],
        round_date=row["round_date"],
    )


def player_score_from_row(row) -> PlayerScore:
    """scores JOIN rounds row -> PlayerScore."""
    return PlayerScore(
        id=row["id"],
        round_id=row["round_id"],
        player_id=row["player_id"],
        gross=row["gross"],
        net=row["net"],
        round_week=row["round_week"],
        round_date=row["round_date"],
    )


# ================================================================
# Model -> Row (writes)
# ================================================================

def score_id_for(round_id: str, player_id: str) -> str:
    """Deterministic id for a score created through the upsert path."""
    return f"score-{round_id}-{player_id}"


def score_update_to_row(update: ScoreUpdate, round_id: str, score_id: Optional[str] = None) -> tuple:
    """ScoreUpdate -> (id, round_id, player_id, gross, net) for league.scores INSERT."""
    return (
        score_id or score_id_for(round_id, update.player_id),
        round_id,
        update.player_id,
        update.gross,
        update.net,
    )


def season_to_row(season: Season) -> tuple:
    return (season.id, season.name, season.start_date, season.end_date)


def player_to_row(player: Player) -> tuple:
    return (player.id, player.name, player.email, player.handicap_index)


def round_to_row(round_: Round) -> tuple:
    return (
        round_.id, round_.season_id, round_.week, round_.date,
        round_.course, round_.tee_time, round_.player_count,
        round_.confirmation_number,
    )


def score_to_row(score: Score) -> tuple:
    return (score.id, score.round_id, score.player_id, score.gross, score.net)
