"""Typed validation of score-edit payloads, run before any mutation."""

from dataclasses import dataclass, field
from typing import Any, Collection, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from models.score import MAX_STROKES, MIN_STROKES, ScoreUpdate


@dataclass(frozen=True)
class Valid:
    updates: List[ScoreUpdate] = field(default_factory=list)


@dataclass(frozen=True)
class Invalid:
    reason: str


ValidationResult = Union[Valid, Invalid]


class _StrokeCheck(BaseModel):
    value: StrictInt = Field(..., ge=MIN_STROKES, le=MAX_STROKES)


def is_valid_stroke_count(value: Any) -> bool:
    """Integer (not bool/float/str) in [MIN_STROKES, MAX_STROKES]."""
    try:
        _StrokeCheck(value=value)
        return True
    except ValidationError:
        return False


class ScoreEntry(BaseModel):
    """One entry of the PATCH body; accepts ``player_id`` or ``playerId``.

    ``net`` must be present, either null or a stroke count.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    player_id: str = Field(..., alias="playerId")
    gross: Any = None
    net: Any = None


def _entries(payload: Any) -> Optional[List[Any]]:
    if not isinstance(payload, dict):
        return None
    scores = payload.get("scores")
    if not isinstance(scores, list) or not scores:
        return None
    return scores


def validate_score_updates(payload: Any, roster_ids: Collection[str]) -> ValidationResult:
    """Check every entry; the first bad one rejects the whole batch."""
    entries = _entries(payload)
    if entries is None:
        return Invalid("Invalid payload")

    updates: List[ScoreUpdate] = []
    for raw in entries:
        try:
            entry = ScoreEntry.model_validate(raw)
        except ValidationError:
            return Invalid("Invalid payload")

        if entry.player_id not in roster_ids:
            return Invalid(f"Invalid player id: {entry.player_id}")
        if not is_valid_stroke_count(entry.gross):
            return Invalid(f"Invalid gross score for player {entry.player_id}")
        net_given = "net" in entry.model_fields_set
        if not net_given or (entry.net is not None and not is_valid_stroke_count(entry.net)):
            return Invalid(f"Invalid net score for player {entry.player_id}")

        updates.append(ScoreUpdate(player_id=entry.player_id, gross=entry.gross, net=entry.net))
    return Valid(updates)
