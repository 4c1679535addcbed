import pytest

from holdem_gto.preflop_config import (
    Position,
    PreflopConfig,
    all_matchups,
    all_openers,
)


@pytest.mark.parametrize(
    "opener, defender, dead",
    [
        (Position.SB, Position.BB, 0.0),
        (Position.UTG, Position.BB, 0.5),
        (Position.UTG, Position.HJ, 1.5),
        (Position.BTN, Position.SB, 1.0),
        (Position.CO, Position.BTN, 1.5),
    ],
)
def test_dead_money_values(opener, defender, dead):
    cfg = PreflopConfig.for_matchup(100.0, opener, defender)
    assert cfg.dead_money == pytest.approx(dead)


def test_all_matchups_count_and_order():
    matchups = all_matchups()
    assert len(matchups) == 15
    assert matchups[0] == (Position.UTG, Position.HJ)
    assert matchups[-1] == (Position.SB, Position.BB)


def test_openers_and_defenders():
    assert all_openers() == (Position.UTG, Position.HJ, Position.CO, Position.BTN, Position.SB)
    assert Position.BTN.defenders() == (Position.SB, Position.BB)
    assert Position.BB.defenders() == ()
    assert len(Position.UTG.defenders()) == 5


def test_blinds_and_names():
    assert Position.SB.blind() == 0.5
    assert Position.BB.blind() == 1.0
    assert Position.CO.blind() == 0.0
    assert str(Position.BTN) == "BTN"


def test_max_raises_0_is_default_unlimited():
    cfg = PreflopConfig.for_matchup(100.0, Position.BTN, Position.BB)
    assert cfg.max_raises == 0
    assert cfg.effective_max_raises() == 20


def test_with_max_raises_returns_limited_copy():
    cfg = PreflopConfig.for_matchup(100.0, Position.BTN, Position.BB)
    limited = cfg.with_max_raises(2)
    assert limited.max_raises == 2
    assert limited.effective_max_raises() == 2
    assert cfg.max_raises == 0
    limited.raise_sizes[0] = 3.0
    assert cfg.raise_sizes[0] == 2.5
    with pytest.raises(ValueError):
        cfg.with_max_raises(-1)


def test_position_sizes():
    utg = PreflopConfig.for_position(100.0, Position.UTG)
    assert utg.defender is Position.BB
    assert (utg.open_size(), utg.three_bet_size(), utg.four_bet_size()) == (2.5, 9.0, 22.0)
    co = PreflopConfig.for_position(100.0, Position.CO)
    assert co.raise_sizes == [2.5, 8.5, 21.0]
    btn = PreflopConfig.for_position(100.0, Position.BTN)
    assert btn.raise_sizes == [2.5, 8.0, 20.0]
    assert btn.limp_raise_sizes == [3.5, 10.0]


def test_can_limp_only_sb_vs_bb():
    assert PreflopConfig.default_for_stack(25.0).can_limp()
    assert not PreflopConfig.for_matchup(100.0, Position.BTN, Position.SB).can_limp()
    assert not PreflopConfig.for_position(100.0, Position.UTG).can_limp()


def test_raise_size_extrapolation():
    cfg = PreflopConfig.for_matchup(100.0, Position.BTN, Position.BB)
    assert cfg.raise_size_for_level(0) == 2.5
    assert cfg.raise_size_for_level(2) == 20.0
    assert cfg.raise_size_for_level(3) == pytest.approx(50.0)
    assert cfg.raise_size_for_level(4) == pytest.approx(125.0)
    assert cfg.limp_raise_size_for_level(0) == 3.5
    assert cfg.limp_raise_size_for_level(2) == pytest.approx(25.0)


def test_empty_sizes_fall_back():
    cfg = PreflopConfig(100.0, Position.SB, Position.BB, 0.0)
    assert cfg.open_size() == 2.5
    assert cfg.three_bet_size() == 9.0
    assert cfg.four_bet_size() == 22.0
    assert cfg.raise_size_for_level(0) == pytest.approx(6.25)
    assert cfg.limp_raise_size_for_level(0) == pytest.approx(8.75)