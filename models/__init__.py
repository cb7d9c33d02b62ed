from .base import BaseLeagueModel
from .season import Season
from .player import Player, collation_key
from .round import Round
from .score import PlayerScore, RoundScore, Score, ScoreUpdate, SeasonScore
from .standing import LeaderboardEntry, StandingRow

__all__ = [
    "BaseLeagueModel",
    "Season",
    "Player",
    "collation_key",
    "Round",
    "Score",
    "RoundScore",
    "SeasonScore",
    "PlayerScore",
    "ScoreUpdate",
    "StandingRow",
    "LeaderboardEntry",
]
