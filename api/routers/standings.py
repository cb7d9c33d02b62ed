"""Standings and trip overview endpoints."""

from fastapi import APIRouter, Depends, Query
from typing import Optional
from database.repository import LeagueRepository
from api.dependencies import get_repository
from api.schemas import LowestRoundResponse, StandingsResponse, TripSummaryResponse
from analytics.movement import build_leaderboard
from analytics.summary import current_leader, lowest_round, round_progress, rounds_remaining

router = APIRouter()


@router.get("/standings", response_model=StandingsResponse)
async def get_standings(
    season_id: Optional[str] = Query(None),
    repo: LeagueRepository = Depends(get_repository),
):
    """Ranked season leaderboard with movement since the previous round."""
    season = await repo.get_season(season_id) if season_id else await repo.get_latest_season()
    key = season_id or (season.id if season else None)
    if key is None:
        return StandingsResponse(season=None, leaderboard=[])

    players = await repo.get_players_for_season(key)
    rounds = await repo.get_rounds_for_season(key)
    scores = await repo.get_scores_for_season(key)
    return StandingsResponse(season=season, leaderboard=build_leaderboard(players, rounds, scores))


@router.get("/summary", response_model=TripSummaryResponse)
async def get_summary(repo: LeagueRepository = Depends(get_repository)):
    season = await repo.get_latest_season()
    if not season:
        return TripSummaryResponse(
            players=[], rounds_scheduled=0, rounds_remaining=0, tee_times=[]
        )

    players = await repo.get_players_for_season(season.id)
    rounds = await repo.get_rounds_for_season(season.id)
    scores = await repo.get_scores_for_season(season.id)

    leaderboard = build_leaderboard(players, rounds, scores)
    lowest = lowest_round(scores)
    return TripSummaryResponse(
        season=season,
        players=[p.name for p in players],
        rounds_scheduled=len(rounds),
        leader=current_leader(leaderboard),
        lowest_round=LowestRoundResponse(
            player_id=lowest.player_id,
            player_name=lowest.player_name,
            round_id=lowest.round_id,
            round_week=lowest.round_week,
            score=lowest.best_available,
        ) if lowest else None,
        rounds_remaining=rounds_remaining(round_progress(rounds, players, scores)),
        tee_times=rounds,
    )
