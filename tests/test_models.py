import pytest
from datetime import date
from pydantic import ValidationError

from models import (
    LeaderboardEntry,
    Player,
    Round,
    RoundScore,
    Score,
    ScoreUpdate,
    Season,
    StandingRow,
)


# ================================================================
# Season
# ================================================================

def test_season_sort_start_defaults_to_epoch():
    assert Season(id="s1", name="No dates").sort_start == date(1970, 1, 1)
    assert Season(id="s2", name="Dated", start_date="2026-05-11").sort_start == date(2026, 5, 11)


def test_season_end_before_start_rejected():
    with pytest.raises(ValidationError):
        Season(id="s1", name="Backwards", start_date="2026-05-13", end_date="2026-05-11")


# ================================================================
# Player
# ================================================================

def test_player_handicap_validation():
    p = Player(id="p1", name="Nick", handicap_index=10.8)
    assert p.display_handicap() == "10.8"
    assert Player(id="p2", name="Nathan").display_handicap() == "N/A"

    with pytest.raises(ValidationError):
        Player(id="p3", name="Too High", handicap_index=60)


def test_player_name_key_is_case_insensitive():
    names = ["nick", "Dave", "alex", "Bob"]
    players = [Player(id=f"p{i}", name=n) for i, n in enumerate(names)]
    ordered = sorted(players, key=lambda p: p.name_key)
    assert [p.name for p in ordered] == ["alex", "Bob", "Dave", "nick"]


def test_player_name_key_orders_accents_with_base_letters():
    names = ["Eve", "\u00c9ric", "Zoe", "eric", "Eric"]
    players = [Player(id=f"p{i}", name=n) for i, n in enumerate(names)]
    ordered = sorted(players, key=lambda p: p.name_key)
    assert [p.name for p in ordered] == ["eric", "Eric", "\u00c9ric", "Eve", "Zoe"]


# ================================================================
# Round
# ================================================================

def test_round_requires_positive_week():
    with pytest.raises(ValidationError):
        Round(id="r1", season_id="s1", week=0, date="2026-05-11")


# ================================================================
# Scores
# ================================================================

def test_score_best_available_prefers_net():
    assert Score(id="x", round_id="r", player_id="p", gross=85, net=74).best_available == 74
    assert Score(id="y", round_id="r", player_id="p", gross=85).best_available == 85


def test_round_score_carries_player_name():
    s = RoundScore(id="x", round_id="r", player_id="p", gross=85, player_name="Nick")
    assert s.net is None
    assert s.player_name == "Nick"


def test_score_assignment_is_validated():
    s = Score(id="x", round_id="r", player_id="p", gross=85)
    s.net = 74
    assert s.best_available == 74
    with pytest.raises(ValidationError):
        s.gross = "eighty"


def test_score_update_range():
    ScoreUpdate(player_id="p", gross=40, net=200)
    with pytest.raises(ValidationError):
        ScoreUpdate(player_id="p", gross=39)
    with pytest.raises(ValidationError):
        ScoreUpdate(player_id="p", gross=80, net=201)


# ================================================================
# Standings
# ================================================================

def test_leaderboard_entry_defaults_to_new():
    row = StandingRow(player_id="p", player_name="Nick")
    entry = LeaderboardEntry(**row.model_dump(), rank=1)
    assert entry.total_net is None
    assert entry.movement is None
    assert entry.movement_text == "NEW"
