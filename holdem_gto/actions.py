"""Betting actions and their compact string encoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class ActionKind(Enum):
    """Kinds of betting action; the value is the symbol used in histories."""

    FOLD = "f"
    CHECK = "x"
    CALL = "c"
    RAISE = "r"
    ALL_IN = "a"


@dataclass(frozen=True, slots=True)
class Action:
    """A betting action. Raises carry a total amount in tenths of a big blind."""

    kind: ActionKind
    amount: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ActionKind):
            raise TypeError(f"kind must be an ActionKind, got {self.kind!r}")
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"amount must be an int, got {self.amount!r}")
        if self.kind is ActionKind.RAISE:
            if self.amount < 0:
                raise ValueError(f"raise amount must be non-negative, got {self.amount}")
        elif self.amount != 0:
            raise ValueError(f"{self.kind.name} takes no amount, got {self.amount}")

    @property
    def is_raise(self) -> bool:
        return self.kind is ActionKind.RAISE

    @property
    def amount_bb(self) -> float:
        """Raise amount in big blinds (0.0 for non-raises)."""
        return self.amount / 10.0

    def __str__(self) -> str:
        if self.kind is ActionKind.RAISE:
            return f"{self.kind.value}{self.amount}"
        return self.kind.value


FOLD = Action(ActionKind.FOLD)
CHECK = Action(ActionKind.CHECK)
CALL = Action(ActionKind.CALL)
ALL_IN = Action(ActionKind.ALL_IN)


def raise_action(amount_x10: int) -> Action:
    """Build a raise to ``amount_x10`` tenths of a big blind."""
    return Action(ActionKind.RAISE, amount_x10)


def history_to_string(history: Iterable[Action]) -> str:
    """Encode an action history as a compact string, e.g. ``"cr35"``."""
    return "".join(str(action) for action in history)