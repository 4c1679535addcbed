"""Heads-up push/fold game: the small blind shoves or folds, the big blind calls or folds."""

from __future__ import annotations

import bisect
import itertools
import random
from dataclasses import dataclass, replace
from typing import Mapping, Sequence

from .actions import ALL_IN, CALL, FOLD, Action, ActionKind
from .hand_classes import (
    NUM_CLASSES,
    RANKS,
    class_combos,
    class_index_to_name,
    grid_class_index,
)

NUM_OUTCOMES = NUM_CLASSES * NUM_CLASSES

Strategy = Mapping[str, Sequence[float]]


def _square_matrix(rows: Sequence[Sequence[float]], what: str) -> list[list[float]]:
    matrix = [list(map(float, row)) for row in rows]
    if len(matrix) != NUM_CLASSES or any(len(row) != NUM_CLASSES for row in matrix):
        raise ValueError(f"{what} must be a {NUM_CLASSES}x{NUM_CLASSES} matrix")
    return matrix


class PushFoldData:
    """Class-vs-class equity matrix, deal weights and their cumulative distribution."""

    def __init__(
        self,
        equity: Sequence[Sequence[float]],
        weights: Sequence[Sequence[float]],
    ) -> None:
        self.equity = _square_matrix(equity, "equity")
        self.weights = _square_matrix(weights, "weights")
        cumulative = list(itertools.accumulate(w for row in self.weights for w in row))
        cumulative[-1] = 1.0
        self.cumulative_weights = cumulative

    def sample_index(self, r: float) -> tuple[int, int]:
        """Map a uniform number in ``[0, 1)`` to a ``(class_0, class_1)`` deal."""
        idx = min(bisect.bisect_right(self.cumulative_weights, r), NUM_OUTCOMES - 1)
        return divmod(idx, NUM_CLASSES)


@dataclass(frozen=True)
class PushFoldState:
    """A push/fold hand; classes are -1 until the cards are dealt."""

    sb_class: int = -1
    bb_class: int = -1
    history: tuple[Action, ...] = ()


class PushFoldGame:
    """Push/fold game at a fixed effective stack (in big blinds)."""

    num_players = 2

    def __init__(self, stack_bb: float, data: PushFoldData) -> None:
        self.stack_bb = stack_bb
        self.data = data

    def initial_state(self) -> PushFoldState:
        return PushFoldState()

    def is_terminal(self, state: PushFoldState) -> bool:
        if len(state.history) == 1:
            return state.history[0].kind is ActionKind.FOLD
        return len(state.history) == 2

    def is_chance_node(self, state: PushFoldState) -> bool:
        return state.sb_class < 0

    def chance_outcomes(self, state: PushFoldState) -> list[tuple[PushFoldState, float]]:
        return [
            (replace(state, sb_class=i, bb_class=j), w)
            for i, row in enumerate(self.data.weights)
            for j, w in enumerate(row)
            if w > 0.0
        ]

    def sample_chance_outcome(
        self, state: PushFoldState, rng: random.Random
    ) -> tuple[PushFoldState, float]:
        i, j = self.data.sample_index(rng.random())
        return replace(state, sb_class=i, bb_class=j), self.data.weights[i][j]

    def current_player(self, state: PushFoldState) -> int:
        return len(state.history)

    def actions(self, state: PushFoldState) -> list[Action]:
        if not state.history:
            return [FOLD, ALL_IN]
        if len(state.history) == 1:
            return [FOLD, CALL]
        raise ValueError(f"no actions after history {state.history!r}")

    def apply_action(self, state: PushFoldState, action: Action) -> PushFoldState:
        return replace(state, history=state.history + (action,))

    def info_set_key(self, state: PushFoldState, player: int) -> str:
        cls = state.sb_class if player == 0 else state.bb_class
        name = class_index_to_name(cls)
        return f"{name}|a" if player == 1 else name

    def payoff(self, state: PushFoldState, player: int) -> float:
        history = state.history
        if history == (FOLD,):
            sb_value = -0.5
        elif history == (ALL_IN, FOLD):
            sb_value = 1.0
        elif history == (ALL_IN, CALL):
            eq = self.data.equity[state.sb_class][state.bb_class]
            sb_value = (2.0 * eq - 1.0) * self.stack_bb
        else:
            raise ValueError(f"not a terminal history: {history!r}")
        return sb_value if player == 0 else -sb_value


def format_chart(title: str, frequencies: Sequence[float]) -> str:
    """Render range frequencies as a 13x13 chart (suited above the diagonal)."""
    if len(frequencies) != NUM_CLASSES:
        raise ValueError(f"Range must have {NUM_CLASSES} elements, got {len(frequencies)}")
    combos = [class_combos(i) for i in range(NUM_CLASSES)]
    total_combos = sum(c * f for c, f in zip(combos, frequencies))
    total_hands = float(sum(combos))

    lines = [
        title,
        "",
        f"Range: {total_combos / total_hands * 100.0:.1f}% "
        f"({total_combos:.0f}/{total_hands:.0f} combos)",
        "",
        "     " + "".join(f" {rank:>4}" for rank in reversed(RANKS)),
    ]
    for row in reversed(range(13)):
        cells = []
        for col in reversed(range(13)):
            freq = frequencies[grid_class_index(row, col)]
            if freq > 0.995:
                cells.append("  100")
            elif freq < 0.005:
                cells.append("    .")
            else:
                cells.append(f" {freq * 100.0:>4.0f}")
        lines.append(f"  {RANKS[row]}  " + "".join(cells))
    lines += [
        "",
        "  (rows = first rank, cols = second rank)",
        "  (above diagonal = suited, below = offsuit)",
    ]
    return "\n".join(lines)


def display_chart(title: str, frequencies: Sequence[float]) -> None:
    """Print a range chart to standard output."""
    print(format_chart(title, frequencies))


def _extract(strategy: Strategy, suffix: str) -> list[float]:
    freqs = [0.0] * NUM_CLASSES
    for i in range(NUM_CLASSES):
        probs = strategy.get(class_index_to_name(i) + suffix)
        if probs is not None:
            freqs[i] = float(probs[1])
    return freqs


def extract_push_range(strategy: Strategy) -> list[float]:
    """Push (all-in) frequency of each hand class for the small blind."""
    return _extract(strategy, "")


def extract_call_range(strategy: Strategy) -> list[float]:
    """Call frequency of each hand class for the big blind facing a push."""
    return _extract(strategy, "|a")