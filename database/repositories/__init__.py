from .season_repo import SeasonRepositoryDB
from .player_repo import PlayerRepositoryDB
from .round_repo import RoundRepositoryDB
from .score_repo import ScoreRepositoryDB

__all__ = ["SeasonRepositoryDB", "PlayerRepositoryDB", "RoundRepositoryDB", "ScoreRepositoryDB"]
