"""API-specific response models for list views and aggregated data."""

from datetime import date as date_type
from pydantic import BaseModel
from typing import List, Optional

from models import LeaderboardEntry, Player, Round, Season


class PlayerRef(BaseModel):
    id: str
    name: str


class RoundRef(BaseModel):
    id: str
    week: int
    date: date_type


class RoundScoreResponse(BaseModel):
    """A score inside a round view, with its player."""
    id: str
    gross: int
    net: Optional[int] = None
    player: PlayerRef


class RecentScoreResponse(BaseModel):
    """A score inside a player view, with its round."""
    id: str
    gross: int
    net: Optional[int] = None
    round: RoundRef


class PlayerSummaryResponse(BaseModel):
    """Roster card."""
    id: str
    name: str
    initials: str
    handicap_index: Optional[float] = None
    handicap_display: str


class PlayerDetailResponse(BaseModel):
    player: Player
    recent_scores: List[RecentScoreResponse]


class RoundDetailResponse(BaseModel):
    round: Round
    scores: List[RoundScoreResponse]
    leaderboard: List[RoundScoreResponse]


class RoundSummaryResponse(BaseModel):
    """Round card with score-entry progress."""
    round: Round
    entered: int
    total: int
    is_complete: bool
    percent_complete: float


class ScoreUpdateResponse(BaseModel):
    ok: bool = True
    scores: List[RoundScoreResponse]


class SeasonDetailResponse(BaseModel):
    season: Optional[Season] = None
    players: List[Player]
    rounds: List[Round]


class StandingsResponse(BaseModel):
    season: Optional[Season] = None
    leaderboard: List[LeaderboardEntry]


class LowestRoundResponse(BaseModel):
    player_id: str
    player_name: str
    round_id: str
    round_week: int
    score: int


class TripSummaryResponse(BaseModel):
    """Aggregated overview for the home page."""
    season: Optional[Season] = None
    players: List[str]
    rounds_scheduled: int
    leader: Optional[LeaderboardEntry] = None
    lowest_round: Optional[LowestRoundResponse] = None
    rounds_remaining: int
    tee_times: List[Round]
