"""Canonical starting-hand classes: 13 pairs, 78 suited and 78 offsuit hands."""

from __future__ import annotations

from typing import Sequence

NUM_CLASSES = 169
RANKS = "23456789TJQKA"

_NUM_PAIRS = 13
_OFFSUIT_START = 91


def _index_to_ranks(index: int) -> tuple[int, int]:
    """Convert a triangle index to ``(low_rank, high_rank)``."""
    high = 1
    while (high + 1) * high // 2 <= index:
        high += 1
    low = index - high * (high - 1) // 2
    return low, high


def _check_index(index: int) -> None:
    if not 0 <= index < NUM_CLASSES:
        raise ValueError(f"hand class index out of range: {index}")


def class_index_to_name(index: int) -> str:
    """Name of a hand class, e.g. ``"AA"``, ``"AKs"`` or ``"72o"``."""
    _check_index(index)
    if index < _NUM_PAIRS:
        rank = RANKS[index]
        return rank + rank
    if index < _OFFSUIT_START:
        low, high = _index_to_ranks(index - _NUM_PAIRS)
        return f"{RANKS[high]}{RANKS[low]}s"
    low, high = _index_to_ranks(index - _OFFSUIT_START)
    return f"{RANKS[high]}{RANKS[low]}o"


def grid_class_index(row: int, col: int) -> int:
    """Class index at rank ``row``/``col`` of a 13x13 chart.

    The diagonal holds pairs, ``col > row`` suited hands and ``row > col``
    offsuit hands.
    """
    if not (0 <= row < 13 and 0 <= col < 13):
        raise ValueError(f"grid position out of range: ({row}, {col})")
    if row == col:
        return row
    if col > row:
        return _NUM_PAIRS + col * (col - 1) // 2 + row
    return _OFFSUIT_START + row * (row - 1) // 2 + col


def class_combos(index: int) -> int:
    """Number of card combinations in a hand class."""
    _check_index(index)
    if index < _NUM_PAIRS:
        return 6
    if index < _OFFSUIT_START:
        return 4
    return 12


def range_stats(freqs: Sequence[float]) -> tuple[float, float]:
    """Return ``(percent_of_all_hands, weighted_combos)`` for a range."""
    if len(freqs) != NUM_CLASSES:
        raise ValueError(f"Range must have {NUM_CLASSES} elements, got {len(freqs)}")
    combos = [class_combos(i) for i in range(NUM_CLASSES)]
    total_combos = sum(c * f for c, f in zip(combos, freqs))
    total_hands = sum(combos)
    return total_combos / total_hands * 100.0, total_combos