"""Results of solved preflop matchups and their opening-range summaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .hand_classes import NUM_CLASSES
from .preflop_config import Position, PreflopConfig, all_openers
from .preflop_strategy import PreflopStrategySet


@dataclass
class MatchupResult:
    """Strategies and exploitability of one solved (opener, defender) matchup."""

    opener: Position
    defender: Position
    config: PreflopConfig
    strategies: list[PreflopStrategySet] = field(default_factory=list)
    exploitability: float = 0.0


@dataclass
class OpeningRangeSummary:
    """Open-raise frequency per class, averaged over an opener's matchups."""

    position: Position
    open_freq: list[float]
    num_matchups: int


def _open_frequencies(result: MatchupResult) -> list[float] | None:
    for strategy_set in result.strategies:
        if "Action" in strategy_set.label:
            for name, freqs in zip(strategy_set.action_names, strategy_set.freqs):
                if "Open" in name or "Raise" in name:
                    return freqs
            return None
    return None


def summarize_opening_ranges(results: Iterable[MatchupResult]) -> list[OpeningRangeSummary]:
    """Average each opener's open-raise frequencies across its defender matchups."""
    results = list(results)
    summaries = []
    for position in all_openers():
        total = [0.0] * NUM_CLASSES
        count = 0
        for result in results:
            if result.opener is not position:
                continue
            freqs = _open_frequencies(result)
            if freqs is None:
                continue
            total = [t + f for t, f in zip(total, freqs)]
            count += 1
        if count:
            total = [t / count for t in total]
        summaries.append(OpeningRangeSummary(position, total, count))
    return summaries