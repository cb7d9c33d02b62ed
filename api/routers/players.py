"""Player API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from typing import List
from database.repository import LeagueRepository
from api.dependencies import get_repository
from api.schemas import (
    PlayerDetailResponse,
    PlayerSummaryResponse,
    RecentScoreResponse,
    RoundRef,
)
from analytics.summary import initials

router = APIRouter()

RECENT_SCORE_LIMIT = 3


@router.get("", response_model=List[PlayerSummaryResponse])
async def get_roster(repo: LeagueRepository = Depends(get_repository)):
    """Roster of the latest season."""
    season = await repo.get_latest_season()
    players = await repo.get_players_for_season(season.id) if season else []
    return [
        PlayerSummaryResponse(
            id=p.id,
            name=p.name,
            initials=initials(p.name),
            handicap_index=p.handicap_index,
            handicap_display=p.display_handicap(),
        )
        for p in players
    ]


@router.get("/{player_id}", response_model=PlayerDetailResponse)
async def get_player(player_id: str, repo: LeagueRepository = Depends(get_repository)):
    player = await repo.get_player(player_id)
    if not player:
        raise HTTPException(404, "Player not found")

    recent = await repo.get_recent_scores_for_player(player.id, RECENT_SCORE_LIMIT)
    return PlayerDetailResponse(
        player=player,
        recent_scores=[
            RecentScoreResponse(
                id=s.id,
                gross=s.gross,
                net=s.net,
                round=RoundRef(id=s.round_id, week=s.round_week, date=s.round_date),
            )
            for s in recent
        ],
    )
