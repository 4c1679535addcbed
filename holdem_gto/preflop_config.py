"""Table positions and preflop bet-sizing configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class Position(Enum):
    """Seats at a 6-max table."""

    UTG = "UTG"
    HJ = "HJ"
    CO = "CO"
    BTN = "BTN"
    SB = "SB"
    BB = "BB"

    def __str__(self) -> str:
        return self.value

    def blind(self) -> float:
        """Forced blind posted from this seat."""
        return {Position.SB: 0.5, Position.BB: 1.0}.get(self, 0.0)

    def defenders(self) -> tuple[Position, ...]:
        """Seats left to act behind this opener."""
        order = list(Position)
        return tuple(order[order.index(self) + 1:])


def all_openers() -> tuple[Position, ...]:
    """Every seat that can open, in table order."""
    return (Position.UTG, Position.HJ, Position.CO, Position.BTN, Position.SB)


def all_matchups() -> list[tuple[Position, Position]]:
    """All 15 ``(opener, defender)`` pairs in standard order."""
    return [(opener, defender) for opener in all_openers() for defender in opener.defenders()]


def _extrapolate(sizes: list[float], level: int, fallback: float) -> float:
    if level < len(sizes):
        return sizes[level]
    last = sizes[-1] if sizes else fallback
    return last * 2.5 ** (level - len(sizes) + 1)


@dataclass
class PreflopConfig:
    """Stack depth, seats, dead money and raise sizes (in big blinds) for one matchup.

    ``raise_sizes`` index 0 is the open, 1 the 3-bet, 2 the 4-bet and so on;
    ``limp_raise_sizes`` index 0 is the raise over a limp. ``max_raises`` of 0
    means unlimited.
    """

    stack_bb: float
    position: Position
    defender: Position
    dead_money: float
    raise_sizes: list[float] = field(default_factory=list)
    limp_raise_sizes: list[float] = field(default_factory=list)
    max_raises: int = 0

    @staticmethod
    def for_matchup(stack_bb: float, opener: Position, defender: Position) -> PreflopConfig:
        if opener in (Position.UTG, Position.HJ):
            three_bet, four_bet = 9.0, 22.0
        elif opener is Position.CO:
            three_bet, four_bet = 8.5, 21.0
        else:
            three_bet, four_bet = 8.0, 20.0
        return PreflopConfig(
            stack_bb=stack_bb,
            position=opener,
            defender=defender,
            dead_money=1.5 - opener.blind() - defender.blind(),
            raise_sizes=[2.5, three_bet, four_bet],
            limp_raise_sizes=[3.5, 10.0],
            max_raises=0,
        )

    @staticmethod
    def for_position(stack_bb: float, position: Position) -> PreflopConfig:
        """Config for ``position`` opening against the big blind."""
        return PreflopConfig.for_matchup(stack_bb, position, Position.BB)

    @staticmethod
    def default_for_stack(stack_bb: float) -> PreflopConfig:
        """Small blind against big blind."""
        return PreflopConfig.for_matchup(stack_bb, Position.SB, Position.BB)

    def with_max_raises(self, n: int) -> PreflopConfig:
        """A copy limited to ``n`` raises (0 = unlimited)."""
        if n < 0:
            raise ValueError(f"max_raises must be non-negative, got {n}")
        return replace(
            self,
            raise_sizes=list(self.raise_sizes),
            limp_raise_sizes=list(self.limp_raise_sizes),
            max_raises=n,
        )

    def can_limp(self) -> bool:
        """Limping is only allowed for small blind against big blind."""
        return self.position is Position.SB and self.defender is Position.BB

    def open_size(self) -> float:
        return self.raise_sizes[0] if self.raise_sizes else 2.5

    def three_bet_size(self) -> float:
        return self.raise_sizes[1] if len(self.raise_sizes) > 1 else 9.0

    def four_bet_size(self) -> float:
        return self.raise_sizes[2] if len(self.raise_sizes) > 2 else 22.0

    def raise_size_for_level(self, level: int) -> float:
        """Raise size at ``level``; beyond the configured sizes, 2.5x per level."""
        return _extrapolate(self.raise_sizes, level, 2.5)

    def limp_raise_size_for_level(self, level: int) -> float:
        """Limp-line raise size at ``level``; beyond the configured sizes, 2.5x per level."""
        return _extrapolate(self.limp_raise_sizes, level, 3.5)

    def effective_max_raises(self) -> int:
        """The explicit raise limit, or a cap of 20 when unlimited."""
        return self.max_raises if self.max_raises > 0 else 20