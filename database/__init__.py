from database.connection import DatabasePool
from database.db_manager import DatabaseManager
from database.memory import InMemoryLeagueRepository, load_league_data
from database.fallback import FallbackLeagueRepository, open_repository
from database.repository import LeagueRepository
from database.repositories import (
    PlayerRepositoryDB,
    RoundRepositoryDB,
    ScoreRepositoryDB,
    SeasonRepositoryDB,
)
from database.exceptions import DatabaseError, NotFoundError, StoreUnavailableError

__all__ = [
    "DatabasePool",
    "DatabaseManager",
    "InMemoryLeagueRepository",
    "load_league_data",
    "FallbackLeagueRepository",
    "open_repository",
    "LeagueRepository",
    "SeasonRepositoryDB",
    "PlayerRepositoryDB",
    "RoundRepositoryDB",
    "ScoreRepositoryDB",
    "DatabaseError",
    "NotFoundError",
    "StoreUnavailableError",
]
