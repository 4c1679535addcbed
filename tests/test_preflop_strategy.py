import pytest

from holdem_gto.hand_classes import NUM_CLASSES
from holdem_gto.preflop_config import Position, PreflopConfig
from holdem_gto.preflop_strategy import (
    PreflopStrategySet,
    display_preflop_chart,
    extract_preflop_strategies,
    format_preflop_chart,
    raise_level_name,
)

AA = 12


@pytest.mark.parametrize(
    "level, name",
    [(0, "Open"), (1, "3bet"), (2, "4bet"), (3, "5bet"), (5, "7bet"), (6, "Raise"), (40, "Raise")],
)
def test_raise_level_name(level, name):
    assert raise_level_name(level) == name


def test_max_raises_1_gives_two_sets():
    config = PreflopConfig.for_matchup(25.0, Position.BTN, Position.BB).with_max_raises(1)
    sets = extract_preflop_strategies({}, config)
    assert len(sets) == 2
    assert sets[1].action_names == ["Fold", "Call", "AllIn"]


def test_btn_vs_bb_labels_and_actions():
    config = PreflopConfig.for_matchup(100.0, Position.BTN, Position.BB)
    sets = extract_preflop_strategies({}, config)
    assert len(sets) == 2
    assert sets[0].label == "BTN Action"
    assert sets[0].history_prefix == ""
    assert sets[0].action_names == ["Fold", "Open(2.5bb)", "AllIn"]
    assert sets[1].label == "BB vs BTN Open"
    assert sets[1].history_prefix == "r25"
    assert sets[1].action_names == ["Fold", "Call", "3bet(8bb)", "AllIn"]


def test_raise_line_continues_while_data_exists():
    config = PreflopConfig.for_matchup(100.0, Position.BTN, Position.BB)
    strategy = {"AA|r25r80": [0.0, 0.3, 0.7, 0.0]}
    sets = extract_preflop_strategies(strategy, config)
    assert len(sets) == 3
    assert sets[2].label == "BTN vs 3bet"
    assert sets[2].history_prefix == "r25r80"
    assert sets[2].action_names == ["Fold", "Call", "4bet(20bb)", "AllIn"]
    assert sets[2].freqs[2][AA] == pytest.approx(0.7)


def test_defender_faces_opener_raise_label():
    config = PreflopConfig.for_matchup(100.0, Position.BTN, Position.BB)
    strategy = {"AA|r25r80": [0.0, 1.0], "KK|r25r80r200": [0.0, 1.0]}
    sets = extract_preflop_strategies(strategy, config)
    assert sets[3].label == "BB vs BTN 4bet"
    assert sets[3].history_prefix == "r25r80r200"


def test_frequencies_read_from_strategy():
    config = PreflopConfig.for_matchup(100.0, Position.BTN, Position.BB)
    sets = extract_preflop_strategies({"AA": [0.1, 0.7, 0.2]}, config)
    opener = sets[0]
    assert len(opener.freqs) == 3
    assert all(len(row) == NUM_CLASSES for row in opener.freqs)
    assert opener.freqs[1][AA] == pytest.approx(0.7)
    assert opener.freqs[2][AA] == pytest.approx(0.2)
    assert opener.freqs[1][0] == 0.0


def test_short_probability_list_leaves_rest_zero():
    config = PreflopConfig.for_matchup(100.0, Position.BTN, Position.BB)
    sets = extract_preflop_strategies({"AA": [0.4]}, config)
    assert sets[0].freqs[0][AA] == pytest.approx(0.4)
    assert sets[0].freqs[1][AA] == 0.0


def test_sb_vs_bb_includes_limp_line():
    config = PreflopConfig.default_for_stack(100.0)
    sets = extract_preflop_strategies({}, config)
    assert [s.label for s in sets] == [
        "SB Action",
        "BB vs SB Open",
        "BB vs Limp",
        "SB vs Limp-Raise",
    ]
    assert sets[0].action_names == ["Fold", "Limp", "Open(2.5bb)", "AllIn"]
    assert sets[2].history_prefix == "c"
    assert sets[2].action_names == ["Check", "Raise(3.5bb)", "AllIn"]
    assert sets[3].history_prefix == "cr35"
    assert sets[3].action_names == ["Fold", "Call", "Reraise(10bb)", "AllIn"]


def test_limp_line_extends_with_data():
    config = PreflopConfig.default_for_stack(100.0)
    sets = extract_preflop_strategies({"AA|cr35r100": [0.0, 1.0]}, config)
    assert sets[-1].label == "BB vs Limp-Raise (2)"
    assert sets[-1].history_prefix == "cr35r100"


def test_limp_line_respects_max_raises():
    config = PreflopConfig.default_for_stack(100.0).with_max_raises(1)
    sets = extract_preflop_strategies({}, config)
    assert len(sets) == 4
    assert sets[-1].label == "SB vs Limp-Raise"
    assert sets[-1].action_names == ["Fold", "Call", "AllIn"]


def test_short_stack_stops_after_open():
    config = PreflopConfig.for_matchup(3.0, Position.BTN, Position.BB)
    sets = extract_preflop_strategies({}, config)
    assert len(sets) == 2
    assert sets[1].action_names == ["Fold", "Call", "AllIn"]


def test_unaffordable_open_is_dropped():
    config = PreflopConfig.for_matchup(2.0, Position.BTN, Position.BB)
    sets = extract_preflop_strategies({}, config)
    assert sets[0].action_names == ["Fold", "AllIn"]


def test_format_preflop_chart_title():
    freqs = [1.0] * NUM_CLASSES
    text = format_preflop_chart("BTN Action", "Fold", freqs)
    lines = text.splitlines()
    assert lines[0] == "BTN Action — Fold"
    assert "Range: 100.0% (1326/1326 combos)" in text


def test_display_preflop_chart_prints(capsys):
    display_preflop_chart("BB vs Limp", "Check", [0.0] * NUM_CLASSES)
    out = capsys.readouterr().out
    assert out.startswith("BB vs Limp — Check\n")
    assert "Range: 0.0% (0/1326 combos)" in out


def test_format_preflop_chart_rejects_bad_length():
    with pytest.raises(ValueError):
        format_preflop_chart("x", "y", [0.0] * 10)


def test_strategy_set_fields():
    s = PreflopStrategySet("L", "r25", ["Fold"], [[0.0] * NUM_CLASSES])
    assert s.label == "L"
    assert s.history_prefix == "r25"
    assert s.action_names == ["Fold"]