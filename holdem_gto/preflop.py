"""Full heads-up preflop game: open, limp, 3-bet, 4-bet and all-in lines."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum

from .actions import ALL_IN, CALL, CHECK, FOLD, Action, ActionKind, raise_action
from .hand_classes import class_index_to_name
from .preflop_config import PreflopConfig
from .push_fold import PushFoldData


@dataclass(frozen=True)
class PreflopState:
    """A preflop hand. Player 0 is the opener, player 1 the defender.

    Hand classes are -1 until the cards are dealt; investments are in big blinds.
    """

    opener_class: int = -1
    defender_class: int = -1
    history: tuple[Action, ...] = ()
    opener_invested: float = 0.0
    defender_invested: float = 0.0


class _Line(Enum):
    OPEN = "open"
    LIMP = "limp"


def _line_of(history: tuple[Action, ...]) -> _Line:
    if history and history[0].kind is ActionKind.CALL:
        return _Line.LIMP
    return _Line.OPEN


def _count_raises(history: tuple[Action, ...]) -> int:
    return sum(1 for action in history if action.is_raise)


def _to_x10(size_bb: float) -> int:
    return int(size_bb * 10.0)


class PreflopGame:
    """Opener against defender with the sizing rules of a :class:`PreflopConfig`."""

    num_players = 2

    def __init__(self, config: PreflopConfig, data: PushFoldData) -> None:
        self.config = config
        self.data = data

    # --- helpers -----------------------------------------------------------

    def _should_offer_allin(self, next_raise: float | None) -> bool:
        """All-in is offered when the next raise is big relative to the stack,
        or on a short stack when no sized raise is available."""
        stack = self.config.stack_bb
        if next_raise is None:
            return stack <= 15.0
        return next_raise >= stack * 0.6

    def _can_add_raise(self, num_raises: int) -> bool:
        limit = self.config.max_raises
        return limit == 0 or num_raises < limit

    def _sized_options(self, within_limit: bool, size: float) -> list[Action]:
        has_raise = within_limit and size < self.config.stack_bb
        options = [raise_action(_to_x10(size))] if has_raise else []
        if self._should_offer_allin(size if has_raise else None):
            options.append(ALL_IN)
        return options

    def _apply_investments(self, state: PreflopState, action: Action) -> tuple[float, float]:
        stack = self.config.stack_bb
        opener_inv = state.opener_invested
        defender_inv = state.defender_invested
        opener_acting = self.current_player(state) == 0

        if action.kind is ActionKind.CALL:
            if opener_acting:
                opener_inv = min(defender_inv, stack)
            else:
                defender_inv = min(opener_inv, stack)
        elif action.kind is ActionKind.RAISE:
            effective = min(action.amount_bb, stack)
            if opener_acting:
                opener_inv = effective
            else:
                defender_inv = effective
        elif action.kind is ActionKind.ALL_IN:
            if opener_acting:
                opener_inv = stack
            else:
                defender_inv = stack
        return opener_inv, defender_inv

    # --- game interface ----------------------------------------------------

    def initial_state(self) -> PreflopState:
        return PreflopState(
            opener_invested=self.config.position.blind(),
            defender_invested=self.config.defender.blind(),
        )

    def is_terminal(self, state: PreflopState) -> bool:
        history = state.history
        if not history:
            return False
        last = history[-1].kind
        if last in (ActionKind.FOLD, ActionKind.CHECK):
            return True
        if last is ActionKind.CALL:
            if len(history) == 1:
                return False  # a limp
            return history[-2].kind in (ActionKind.RAISE, ActionKind.ALL_IN)
        return False

    def is_chance_node(self, state: PreflopState) -> bool:
        return state.opener_class < 0

    def chance_outcomes(self, state: PreflopState) -> list[tuple[PreflopState, float]]:
        return [
            (replace(state, opener_class=i, defender_class=j), w)
            for i, row in enumerate(self.data.weights)
            for j, w in enumerate(row)
            if w > 0.0
        ]

    def sample_chance_outcome(
        self, state: PreflopState, rng: random.Random
    ) -> tuple[PreflopState, float]:
        i, j = self.data.sample_index(rng.random())
        return replace(state, opener_class=i, defender_class=j), self.data.weights[i][j]

    def current_player(self, state: PreflopState) -> int:
        history = state.history
        if not history:
            return 0
        if _line_of(history) is _Line.LIMP:
            after_limp = history[1:]
            if not after_limp:
                return 1
            return 1 if len(after_limp) % 2 == 0 else 0
        return 0 if len(history) % 2 == 0 else 1

    def actions(self, state: PreflopState) -> list[Action]:
        cfg = self.config
        history = state.history
        line = _line_of(history)
        num_raises = _count_raises(history)

        if not history:
            actions = [FOLD]
            if cfg.can_limp():
                actions.append(CALL)
            open_size = cfg.raise_size_for_level(0)
            if open_size < cfg.stack_bb:
                actions.append(raise_action(_to_x10(open_size)))
            if self._should_offer_allin(open_size):
                actions.append(ALL_IN)
            return actions

        last = history[-1].kind
        if line is _Line.LIMP and last is ActionKind.CALL and num_raises == 0:
            # The limp counts as the first raise level.
            size = cfg.limp_raise_size_for_level(0)
            return [CHECK] + self._sized_options(self._can_add_raise(1), size)

        if last is ActionKind.ALL_IN:
            return [FOLD, CALL]

        if last is ActionKind.RAISE:
            if line is _Line.OPEN:
                effective_count = num_raises
                size = cfg.raise_size_for_level(num_raises)
            else:
                effective_count = num_raises + 1
                size = cfg.limp_raise_size_for_level(num_raises)
            return [FOLD, CALL] + self._sized_options(self._can_add_raise(effective_count), size)

        raise ValueError(f"no actions after history {history!r}")

    def apply_action(self, state: PreflopState, action: Action) -> PreflopState:
        opener_inv, defender_inv = self._apply_investments(state, action)
        return replace(
            state,
            history=state.history + (action,),
            opener_invested=opener_inv,
            defender_invested=defender_inv,
        )

    def info_set_key(self, state: PreflopState, player: int) -> str:
        cls = state.opener_class if player == 0 else state.defender_class
        name = class_index_to_name(cls)
        if not state.history:
            return name
        return name + "|" + "".join(str(action) for action in state.history)

    def payoff(self, state: PreflopState, player: int) -> float:
        if not self.is_terminal(state):
            raise ValueError(f"not a terminal history: {state.history!r}")
        dead = self.config.dead_money

        if state.history[-1].kind is not ActionKind.FOLD:
            eq = self.data.equity[state.opener_class][state.defender_class]
            pot = state.opener_invested + state.defender_invested + dead
            opener_ev = eq * pot - state.opener_invested
            return opener_ev if player == 0 else -opener_ev

        folder = self.current_player(replace(state, history=state.history[:-1]))
        if folder == player:
            return -(state.opener_invested if player == 0 else state.defender_invested)
        return (state.defender_invested if player == 0 else state.opener_invested) + dead