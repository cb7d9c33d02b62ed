from datetime import date, timedelta

import pytest

from analytics.movement import (
    NO_CHANGE_MARKER,
    build_leaderboard,
    compute_movement,
    format_movement,
    previous_cutoff_round,
    scores_through_round,
)
from analytics.standings import compute_standings, rank_standings
from models import Player, Round, Score

START = date(2026, 5, 11)


def _round(n, *, day=None):
    return Round(
        id=f"round-{n:02d}",
        season_id="season-1",
        week=n,
        date=START + timedelta(days=(n - 1) if day is None else day),
    )


def _score(round_n, player_id, gross, net):
    return Score(
        id=f"s-{round_n}-{player_id}",
        round_id=f"round-{round_n:02d}",
        player_id=player_id,
        gross=gross,
        net=net,
    )


PLAYERS = [Player(id="a", name="Alex"), Player(id="b", name="Blake"), Player(id="c", name="Casey")]


# ================================================================
# Cutoff selection
# ================================================================

def test_no_cutoff_with_fewer_than_two_rounds():
    assert previous_cutoff_round([]) is None
    assert previous_cutoff_round([_round(1)]) is None


def test_cutoff_is_second_to_last_by_date_not_input_order():
    rounds = [_round(3), _round(1), _round(2)]
    assert previous_cutoff_round(rounds).id == "round-02"


def test_cutoff_uses_date_even_when_week_numbers_disagree():
    # Week 2 was played first.
    rounds = [_round(1, day=5), _round(2, day=0), _round(3, day=9)]
    assert previous_cutoff_round(rounds).id == "round-01"


def test_scores_through_round_is_inclusive():
    rounds = [_round(1), _round(2), _round(3)]
    scores = [_score(1, "a", 80, 70), _score(2, "a", 81, 71), _score(3, "a", 82, 72)]
    kept = scores_through_round(rounds, scores, rounds[1])
    assert [s.round_id for s in kept] == ["round-01", "round-02"]


def test_scores_from_unknown_rounds_are_excluded():
    rounds = [_round(1), _round(2)]
    stray = Score(id="x", round_id="round-99", player_id="a", gross=80, net=70)
    assert scores_through_round(rounds, [stray], rounds[0]) == []


# ================================================================
# compute_movement
# ================================================================

@pytest.mark.parametrize("round_count", [0, 1])
def test_movement_is_new_for_everyone_without_previous_round(round_count):
    rounds = [_round(n) for n in range(1, round_count + 1)]
    scores = [_score(1, p.id, 80, 70) for p in PLAYERS] if round_count else []
    current = rank_standings(compute_standings(PLAYERS, scores))

    movement = compute_movement(rounds, scores, PLAYERS, current)
    assert movement == {"a": None, "b": None, "c": None}


def test_movement_is_previous_rank_minus_current_rank():
    rounds = [_round(1), _round(2)]
    scores = [
        # After round 1: a=70, b=72, c=74 -> a, b, c
        _score(1, "a", 80, 70), _score(1, "b", 82, 72), _score(1, "c", 84, 74),
        # After round 2: a=150, b=144, c=146 -> b, c, a
        _score(2, "a", 90, 80), _score(2, "b", 82, 72), _score(2, "c", 82, 72),
    ]
    current = rank_standings(compute_standings(PLAYERS, scores))
    assert [r.player_id for r in current] == ["b", "c", "a"]

    movement = compute_movement(rounds, scores, PLAYERS, current)
    assert movement == {"b": 1, "c": 1, "a": -2}


def test_player_missing_from_previous_board_is_new():
    rounds = [_round(1), _round(2)]
    scores = [_score(1, "a", 80, 70), _score(2, "a", 80, 70)]
    late_joiner = Player(id="z", name="Zed")
    current = rank_standings(compute_standings(PLAYERS + [late_joiner], scores))

    movement = compute_movement(rounds, scores, PLAYERS, current)
    assert movement["z"] is None
    assert movement["a"] == 0


def test_partially_scored_last_round_still_moves_cutoff():
    rounds = [_round(1), _round(2), _round(3)]
    scores = [
        _score(1, "a", 80, 70), _score(1, "b", 82, 72),
        _score(2, "a", 90, 80), _score(2, "b", 82, 72),
        # Round 3 only has one score so far.
        _score(3, "b", 82, 72),
    ]
    current = rank_standings(compute_standings(PLAYERS[:2], scores))
    movement = compute_movement(rounds, scores, PLAYERS[:2], current)
    # Previous board covers rounds 1-2 (a=150, b=144), current is b=216, a=150.
    assert [r.player_id for r in current] == ["a", "b"]
    assert movement == {"a": 1, "b": -1}


# ================================================================
# Display
# ================================================================

@pytest.mark.parametrize(
    "movement, expected",
    [(None, "NEW"), (2, "+2"), (1, "+1"), (0, NO_CHANGE_MARKER), (-1, "-1"), (-3, "-3")],
)
def test_format_movement(movement, expected):
    assert format_movement(movement) == expected


def test_build_leaderboard_fills_rank_and_movement():
    rounds = [_round(1), _round(2)]
    scores = [
        _score(1, "a", 80, 70), _score(1, "b", 82, 72), _score(1, "c", 84, 74),
        _score(2, "a", 90, 80), _score(2, "b", 82, 72), _score(2, "c", 82, 72),
    ]
    board = build_leaderboard(PLAYERS, rounds, scores)

    assert [(e.rank, e.player_name, e.movement_text) for e in board] == [
        (1, "Blake", "+1"),
        (2, "Casey", "+1"),
        (3, "Alex", "-2"),
    ]
    assert board[0].total_net == 144
    assert board[0].rounds_played == 2


def test_build_leaderboard_single_round_is_all_new():
    board = build_leaderboard(PLAYERS, [_round(1)], [_score(1, "a", 80, 70)])
    assert [e.movement_text for e in board] == ["NEW", "NEW", "NEW"]
    assert board[0].player_id == "a"
