"""The data-access contract shared by the PostgreSQL and in-memory stores."""

from typing import List, Optional, Protocol, runtime_checkable

from models import Player, PlayerScore, Round, RoundScore, Season, ScoreUpdate, SeasonScore


@runtime_checkable
class LeagueRepository(Protocol):
    """Read/write access to seasons, rosters, rounds and scores.

    Both implementations sort and filter identically, so callers cannot tell
    which store served a successful response.
    """

    async def get_latest_season(self) -> Optional[Season]: ...

    async def get_season(self, season_id: str) -> Optional[Season]: ...

    async def get_players(self) -> List[Player]: ...

    async def get_players_for_season(self, season_id: str) -> List[Player]: ...

    async def get_player(self, player_id: str) -> Optional[Player]: ...

    async def get_rounds_for_season(self, season_id: str) -> List[Round]: ...

    async def get_round(self, round_id: str) -> Optional[Round]: ...

    async def get_scores_for_season(self, season_id: str) -> List[SeasonScore]: ...

    async def get_scores_for_round(self, round_id: str) -> List[RoundScore]: ...

    async def get_recent_scores_for_player(self, player_id: str, limit: int = 3) -> List[PlayerScore]: ...

    async def upsert_scores(self, round_id: str, updates: List[ScoreUpdate]) -> None: ...

    async def health_check(self) -> bool: ...
