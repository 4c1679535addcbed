import pytest

from holdem_gto.hand_classes import (
    NUM_CLASSES,
    class_combos,
    class_index_to_name,
    grid_class_index,
    range_stats,
)


def test_class_name_roundtrip():
    for i in range(NUM_CLASSES):
        name = class_index_to_name(i)
        assert 2 <= len(name) <= 3, f"class {i} = {name!r} has bad length"
    assert class_index_to_name(0) == "22"
    assert class_index_to_name(12) == "AA"


def test_names_are_unique():
    names = {class_index_to_name(i) for i in range(NUM_CLASSES)}
    assert len(names) == NUM_CLASSES


def test_name_suffixes_by_section():
    assert all(len(class_index_to_name(i)) == 2 for i in range(13))
    assert all(class_index_to_name(i).endswith("s") for i in range(13, 91))
    assert all(class_index_to_name(i).endswith("o") for i in range(91, NUM_CLASSES))


def test_non_pair_names_have_high_card_first():
    order = "23456789TJQKA"
    for i in range(13, NUM_CLASSES):
        name = class_index_to_name(i)
        assert order.index(name[0]) > order.index(name[1])


@pytest.mark.parametrize("bad", [-1, NUM_CLASSES, 500])
def test_out_of_range_index(bad):
    with pytest.raises(ValueError):
        class_index_to_name(bad)


def test_grid_covers_every_class_once():
    indices = sorted(grid_class_index(r, c) for r in range(13) for c in range(13))
    assert indices == list(range(NUM_CLASSES))


def test_grid_orientation():
    assert class_index_to_name(grid_class_index(11, 12)) == "AKs"
    assert class_index_to_name(grid_class_index(12, 11)) == "AKo"
    assert class_index_to_name(grid_class_index(12, 12)) == "AA"


def test_grid_out_of_range():
    with pytest.raises(ValueError):
        grid_class_index(13, 0)


def test_class_combos_by_section():
    assert class_combos(0) == 6
    assert class_combos(50) == 4
    assert class_combos(150) == 12


def test_full_range_stats():
    pct, combos = range_stats([1.0] * NUM_CLASSES)
    assert pct == pytest.approx(100.0)
    assert combos == pytest.approx(sum(class_combos(i) for i in range(NUM_CLASSES)))


def test_empty_range_stats():
    assert range_stats([0.0] * NUM_CLASSES) == (0.0, 0.0)


def test_single_pair_range():
    freqs = [0.0] * NUM_CLASSES
    freqs[12] = 1.0
    pct, combos = range_stats(freqs)
    assert combos == pytest.approx(6.0)
    full_pct, full_combos = range_stats([1.0] * NUM_CLASSES)
    assert pct == pytest.approx(full_pct * 6.0 / full_combos)


def test_range_stats_wrong_length():
    with pytest.raises(ValueError):
        range_stats([1.0] * 10)