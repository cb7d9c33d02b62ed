from datetime import date as date_type
from pydantic import Field
from typing import Optional

from .base import BaseLeagueModel


class Round(BaseLeagueModel):
    """One scheduled outing within a season, identified by its week number."""
    id: str
    season_id: str
    week: int = Field(..., ge=1)
    date: date_type
    course: Optional[str] = None
    tee_time: Optional[str] = None            # free text, e.g. "3:00 PM"
    player_count: Optional[int] = Field(None, ge=0)
    confirmation_number: Optional[str] = None

    @property
    def sort_key(self) -> tuple:
        """Chronological ordering key: date, then week."""
        return (self.date, self.week, self.id)
