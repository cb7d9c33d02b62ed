from datetime import date
from pydantic import model_validator
from typing import Optional

from .base import BaseLeagueModel

# Seasons without a start date sort as if they started at the epoch.
EPOCH = date(1970, 1, 1)


class Season(BaseLeagueModel):
    """A bounded trip/season: a roster of players and a schedule of rounds."""
    id: str
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @model_validator(mode='after')
    def validate_date_order(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError(
                f"Season end date {self.end_date} is before start date {self.start_date}"
            )
        return self

    @property
    def sort_start(self) -> date:
        """Start date used when picking the latest season."""
        return self.start_date or EPOCH
