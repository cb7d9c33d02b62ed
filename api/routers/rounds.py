"""Round API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from typing import Any, List
from models import Round, RoundScore
from database.repository import LeagueRepository
from database.exceptions import NotFoundError
from api.dependencies import get_repository, require_admin_key
from api.schemas import (
    PlayerRef,
    RoundDetailResponse,
    RoundScoreResponse,
    RoundSummaryResponse,
    ScoreUpdateResponse,
)
from api.validation import Invalid, validate_score_updates
from analytics.summary import round_leaderboard, round_progress

logger = logging.getLogger(__name__)

router = APIRouter()


def score_response(s: RoundScore) -> RoundScoreResponse:
    return RoundScoreResponse(
        id=s.id,
        gross=s.gross,
        net=s.net,
        player=PlayerRef(id=s.player_id, name=s.player_name),
    )


async def read_json(request: Request) -> Any:
    """Request body as JSON, or None when it is missing or malformed."""
    try:
        return await request.json()
    except ValueError:
        return None


async def require_round(repo: LeagueRepository, round_id: str) -> Round:
    round_ = await repo.get_round(round_id)
    if not round_:
        raise NotFoundError(f"Round {round_id} not found")
    return round_


@router.get("", response_model=List[RoundSummaryResponse])
async def get_rounds(repo: LeagueRepository = Depends(get_repository)):
    """Latest season's rounds with score-entry progress."""
    season = await repo.get_latest_season()
    if not season:
        return []
    rounds = await repo.get_rounds_for_season(season.id)
    players = await repo.get_players_for_season(season.id)
    scores = await repo.get_scores_for_season(season.id)
    return [RoundSummaryResponse(**row) for row in round_progress(rounds, players, scores)]


@router.get("/{round_id}", response_model=RoundDetailResponse)
async def get_round(round_id: str, repo: LeagueRepository = Depends(get_repository)):
    try:
        round_ = await require_round(repo, round_id)
    except NotFoundError:
        raise HTTPException(404, "Round not found")

    scores = await repo.get_scores_for_round(round_.id)
    return RoundDetailResponse(
        round=round_,
        scores=[score_response(s) for s in scores],
        leaderboard=[score_response(s) for s in round_leaderboard(scores)],
    )


@router.patch(
    "/{round_id}",
    response_model=ScoreUpdateResponse,
    dependencies=[Depends(require_admin_key)],
)
async def update_round_scores(
    round_id: str,
    request: Request,
    repo: LeagueRepository = Depends(get_repository),
):
    """Validate the whole batch, then upsert each (round, player) score."""
    try:
        round_ = await require_round(repo, round_id)
    except NotFoundError:
        raise HTTPException(404, "Round not found")

    payload = await read_json(request)
    roster = await repo.get_players_for_season(round_.season_id)
    result = validate_score_updates(payload, {p.id for p in roster})
    if isinstance(result, Invalid):
        logger.info("Rejected score edit for round %s: %s", round_id, result.reason)
        raise HTTPException(400, result.reason)

    try:
        await repo.upsert_scores(round_.id, result.updates)
    except Exception:
        logger.exception("Score upsert failed for round %s", round_id)
        raise
    logger.info("Saved %d score(s) for round %s", len(result.updates), round_id)

    scores = await repo.get_scores_for_round(round_.id)
    return ScoreUpdateResponse(scores=[score_response(s) for s in scores])
