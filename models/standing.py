from pydantic import BaseModel, Field
from typing import Optional


class StandingRow(BaseModel):
    """Season-aggregate totals for one roster player."""
    player_id: str
    player_name: str
    rounds_played: int = Field(0, ge=0)
    total_gross: int = 0
    total_net: Optional[int] = None  # None until at least one net score exists


class LeaderboardEntry(StandingRow):
    """A ranked standing with its round-over-round movement."""
    rank: int = Field(..., ge=1)
    movement: Optional[int] = None  # previous rank - current rank; None means NEW
    movement_text: str = "NEW"
