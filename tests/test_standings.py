import math

import pytest

from analytics.standings import compute_standings, rank_positions, rank_standings, ranking_key
from models import Player, Score, StandingRow


def _players(*names):
    return [Player(id=f"player-{name.lower()}", name=name) for name in names]


def _score(round_id, player_id, gross, net=None):
    return Score(id=f"{round_id}-{player_id}", round_id=round_id, player_id=player_id, gross=gross, net=net)


ROSTER = _players("Nick", "Nathan", "Neil", "Dave")

ROUND_ONE = [
    _score("round-01", "player-nick", 85, 74),
    _score("round-01", "player-nathan", 91, 77),
    _score("round-01", "player-neil", 82, 73),
    _score("round-01", "player-dave", 97, 81),
]


# ================================================================
# compute_standings
# ================================================================

def test_every_roster_player_appears_once():
    rows = compute_standings(ROSTER, ROUND_ONE[:2])
    assert len(rows) == len(ROSTER)
    assert [r.player_id for r in rows] == [p.id for p in ROSTER]   # roster order


def test_totals_accumulate_across_rounds():
    scores = ROUND_ONE + [
        _score("round-02", "player-nick", 83, 72),
        _score("round-02", "player-neil", 80, None),
    ]
    rows = {r.player_id: r for r in compute_standings(ROSTER, scores)}

    assert rows["player-nick"].rounds_played == 2
    assert rows["player-nick"].total_gross == 168
    assert rows["player-nick"].total_net == 146

    # A missing net still counts the round and the gross, but not the net.
    assert rows["player-neil"].rounds_played == 2
    assert rows["player-neil"].total_gross == 162
    assert rows["player-neil"].total_net == 73


def test_player_without_scores_has_zero_gross_and_no_net():
    rows = compute_standings(_players("Nick"), [])
    assert rows[0].rounds_played == 0
    assert rows[0].total_gross == 0
    assert rows[0].total_net is None


def test_player_with_only_gross_scores_has_no_net():
    rows = compute_standings(_players("Nick"), [_score("round-01", "player-nick", 90)])
    assert rows[0].total_gross == 90
    assert rows[0].total_net is None


def test_scores_outside_roster_are_ignored():
    rows = compute_standings(_players("Nick"), [_score("round-01", "player-ghost", 70, 60)])
    assert len(rows) == 1
    assert rows[0].rounds_played == 0


def test_empty_roster_gives_empty_standings():
    assert compute_standings([], ROUND_ONE) == []


# ================================================================
# rank_standings
# ================================================================

def test_single_round_scenario_ranks_by_net():
    ranked = rank_standings(compute_standings(ROSTER, ROUND_ONE))
    assert [(r.player_name, r.total_net) for r in ranked] == [
        ("Neil", 73), ("Nick", 74), ("Nathan", 77), ("Dave", 81),
    ]


def test_missing_net_sorts_after_any_finite_net():
    rows = [
        StandingRow(player_id="a", player_name="A", total_gross=60, total_net=None),
        StandingRow(player_id="b", player_name="B", total_gross=120, total_net=110),
    ]
    assert [r.player_id for r in rank_standings(rows)] == ["b", "a"]


def test_equal_net_broken_by_gross():
    rows = [
        StandingRow(player_id="a", player_name="A", total_gross=90, total_net=76),
        StandingRow(player_id="b", player_name="B", total_gross=87, total_net=76),
    ]
    assert [r.player_id for r in rank_standings(rows)] == ["b", "a"]


def test_full_ties_keep_input_order():
    rows = [
        StandingRow(player_id=pid, player_name=pid, total_gross=0, total_net=None)
        for pid in ("z", "m", "a")
    ]
    assert [r.player_id for r in rank_standings(rows)] == ["z", "m", "a"]

    tied = [
        StandingRow(player_id=pid, player_name=pid, total_gross=80, total_net=70)
        for pid in ("q", "b")
    ]
    assert [r.player_id for r in rank_standings(tied)] == ["q", "b"]


def test_zero_score_players_rank_last():
    ranked = rank_standings(compute_standings(ROSTER + _players("Zed"), ROUND_ONE))
    assert ranked[-1].player_name == "Zed"


def test_ranking_key_treats_missing_net_as_infinity():
    row = StandingRow(player_id="a", player_name="A", total_gross=12)
    assert ranking_key(row) == (math.inf, 12)


def test_rank_positions_are_one_based():
    ranked = rank_standings(compute_standings(ROSTER, ROUND_ONE))
    positions = rank_positions(ranked)
    assert positions["player-neil"] == 1
    assert positions["player-dave"] == 4


def test_rank_does_not_mutate_input():
    rows = compute_standings(ROSTER, ROUND_ONE)
    before = [r.player_id for r in rows]
    rank_standings(rows)
    assert [r.player_id for r in rows] == before


@pytest.mark.parametrize("count", [0, 1, 5])
def test_output_length_matches_roster(count):
    roster = [Player(id=f"p{i}", name=f"P{i}") for i in range(count)]
    assert len(rank_standings(compute_standings(roster, ROUND_ONE))) == count
