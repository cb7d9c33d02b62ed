"""Season API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from models import Season
from database.repository import LeagueRepository
from api.dependencies import get_repository
from api.schemas import SeasonDetailResponse

router = APIRouter()


@router.get("/latest", response_model=Season)
async def get_latest_season(repo: LeagueRepository = Depends(get_repository)):
    season = await repo.get_latest_season()
    if not season:
        raise HTTPException(404, "Season not found")
    return season


@router.get("/{season_id}", response_model=SeasonDetailResponse)
async def get_season(season_id: str, repo: LeagueRepository = Depends(get_repository)):
    """Season with roster and schedule. Unknown ids give empty lists, not 404."""
    return SeasonDetailResponse(
        season=await repo.get_season(season_id),
        players=await repo.get_players_for_season(season_id),
        rounds=await repo.get_rounds_for_season(season_id),
    )
