"""Strategy slices of a solved preflop game, one per decision point."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from .actions import ALL_IN, CALL, CHECK, FOLD, Action, raise_action
from .hand_classes import NUM_CLASSES, class_index_to_name
from .preflop_config import PreflopConfig
from .push_fold import format_chart

Strategy = Mapping[str, Sequence[float]]

_RAISE_LEVEL_NAMES = ("Open", "3bet", "4bet", "5bet", "6bet", "7bet")


@dataclass
class PreflopStrategySet:
    """Per-class frequencies of each action at one decision point."""

    label: str
    history_prefix: str
    action_names: list[str] = field(default_factory=list)
    freqs: list[list[float]] = field(default_factory=list)


def raise_level_name(level: int) -> str:
    """Name of a raise level: 0 is the open, 1 the 3-bet and so on."""
    if 0 <= level < len(_RAISE_LEVEL_NAMES):
        return _RAISE_LEVEL_NAMES[level]
    return "Raise"


def _to_x10(size_bb: float) -> int:
    return int(size_bb * 10.0)


def _affordable(actions: list[tuple[Action, str]], stack: float) -> list[tuple[Action, str]]:
    return [(a, name) for a, name in actions if not a.is_raise or a.amount_bb < stack]


def _extract_freqs(
    strategy: Strategy, hist: str, num_actions: int
) -> list[list[float]]:
    freqs = [[0.0] * NUM_CLASSES for _ in range(num_actions)]
    for i in range(NUM_CLASSES):
        name = class_index_to_name(i)
        key = f"{name}|{hist}" if hist else name
        probs = strategy.get(key)
        if probs is None:
            continue
        for ai, prob in enumerate(probs[:num_actions]):
            freqs[ai][i] = float(prob)
    return freqs


def _has_data(freqs: list[list[float]]) -> bool:
    return any(v > 0.0 for row in freqs for v in row)


def _make_set(
    strategy: Strategy, label: str, hist: str, actions: list[tuple[Action, str]]
) -> PreflopStrategySet:
    return PreflopStrategySet(
        label=label,
        history_prefix=hist,
        action_names=[name for _, name in actions],
        freqs=_extract_freqs(strategy, hist, len(actions)),
    )


def _opener_set(strategy: Strategy, config: PreflopConfig) -> PreflopStrategySet:
    open_size = config.raise_size_for_level(0)
    defs: list[tuple[Action, str]] = [(FOLD, "Fold")]
    if config.can_limp():
        defs.append((CALL, "Limp"))
    defs.append((raise_action(_to_x10(open_size)), f"Open({open_size:.1f}bb)"))
    defs.append((ALL_IN, "AllIn"))
    actions = _affordable(defs, config.stack_bb)
    return _make_set(strategy, f"{config.position} Action", "", actions)


def _raise_line_sets(strategy: Strategy, config: PreflopConfig) -> list[PreflopStrategySet]:
    stack = config.stack_bb
    opener_name = str(config.position)
    defender_name = str(config.defender)
    max_r = config.effective_max_raises()
    sets: list[PreflopStrategySet] = []
    hist = ""
    level = 0
    while True:
        hist += f"r{_to_x10(config.raise_size_for_level(level))}"
        num_raises = level + 1
        is_opener = num_raises % 2 == 0
        player_name = opener_name if is_opener else defender_name

        within_limit = max_r == 0 or num_raises < max_r
        next_size = config.raise_size_for_level(level + 1)
        defs: list[tuple[Action, str]] = [(FOLD, "Fold"), (CALL, "Call")]
        if within_limit and next_size < stack:
            defs.append(
                (
                    raise_action(_to_x10(next_size)),
                    f"{raise_level_name(level + 1)}({next_size:.0f}bb)",
                )
            )
        defs.append((ALL_IN, "AllIn"))
        actions = _affordable(defs, stack)

        strategy_set = _make_set(strategy, "", hist, actions)
        if not _has_data(strategy_set.freqs) and num_raises >= 2:
            break

        if level == 0:
            other = defender_name if is_opener else opener_name
            strategy_set.label = f"{player_name} vs {other} Open"
        elif is_opener:
            strategy_set.label = f"{player_name} vs {raise_level_name(level)}"
        else:
            strategy_set.label = f"{player_name} vs {opener_name} {raise_level_name(level)}"
        sets.append(strategy_set)

        if not within_limit or next_size >= stack:
            break
        level += 1
    return sets


def _limp_line_sets(strategy: Strategy, config: PreflopConfig) -> list[PreflopStrategySet]:
    stack = config.stack_bb
    opener_name = str(config.position)
    defender_name = str(config.defender)
    limp_raise_size = config.limp_raise_size_for_level(0)
    limp_raise_r = _to_x10(limp_raise_size)

    vs_limp = _affordable(
        [
            (CHECK, "Check"),
            (raise_action(limp_raise_r), f"Raise({limp_raise_size:.1f}bb)"),
            (ALL_IN, "AllIn"),
        ],
        stack,
    )
    sets = [_make_set(strategy, f"{defender_name} vs Limp", "c", vs_limp)]

    max_r = config.effective_max_raises()
    hist = f"cr{limp_raise_r}"
    level = 1
    while True:
        within_limit = max_r == 0 or level + 1 < max_r
        size = config.limp_raise_size_for_level(level)
        r = _to_x10(size)
        player_name = opener_name if level % 2 == 1 else defender_name

        defs: list[tuple[Action, str]] = [(FOLD, "Fold"), (CALL, "Call")]
        if within_limit and size < stack:
            defs.append((raise_action(r), f"Reraise({size:.0f}bb)"))
        defs.append((ALL_IN, "AllIn"))
        actions = _affordable(defs, stack)

        suffix = f" ({level})" if level > 1 else ""
        strategy_set = _make_set(
            strategy, f"{player_name} vs Limp-Raise{suffix}", hist, actions
        )
        if not _has_data(strategy_set.freqs) and level >= 2:
            break
        sets.append(strategy_set)

        if not within_limit or size >= stack:
            break
        hist += f"r{r}"
        level += 1
    return sets


def extract_preflop_strategies(
    strategy: Strategy, config: PreflopConfig
) -> list[PreflopStrategySet]:
    """Slice a solved strategy into the opener's action, the raise line and the limp line."""
    sets = [_opener_set(strategy, config)]
    sets.extend(_raise_line_sets(strategy, config))
    if config.can_limp():
        sets.extend(_limp_line_sets(strategy, config))
    return sets


def format_preflop_chart(label: str, action_name: str, freqs: Sequence[float]) -> str:
    """Render one action's frequencies at a decision point as a chart."""
    return format_chart(f"{label} — {action_name}", freqs)


def display_preflop_chart(label: str, action_name: str, freqs: Sequence[float]) -> None:
    """Print one action's frequencies at a decision point as a chart."""
    print(format_preflop_chart(label, action_name, freqs))