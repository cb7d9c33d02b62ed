from datetime import date
from pydantic import Field
from typing import Optional

from .base import BaseLeagueModel

# Accepted stroke range for an 18-hole round entered through the admin path.
MIN_STROKES = 40
MAX_STROKES = 200


class Score(BaseLeagueModel):
    """One player's gross/net stroke count for one round."""
    id: str
    round_id: str
    player_id: str
    gross: int
    net: Optional[int] = None  # recorded once a handicap-adjusted score exists

    @property
    def best_available(self) -> int:
        """Net when recorded, otherwise gross."""
        return self.net if self.net is not None else self.gross


class RoundScore(Score):
    """A score joined with its player's name (round detail view)."""
    player_name: str


class SeasonScore(Score):
    """A score joined with player name and round week/date (season views)."""
    player_name: str
    round_week: int
    round_date: date


class PlayerScore(Score):
    """A score joined with its round's week/date (player detail view)."""
    round_week: int
    round_date: date


class ScoreUpdate(BaseLeagueModel):
    """A validated (player, gross, net) tuple ready to be upserted."""
    player_id: str
    gross: int = Field(..., ge=MIN_STROKES, le=MAX_STROKES)
    net: Optional[int] = Field(None, ge=MIN_STROKES, le=MAX_STROKES)
