# holdem_gto

Game models for heads-up Texas Hold'em decisions, for use with a
counterfactual regret minimisation (CFR) trainer. The package defines the game
trees, the payoffs and the information-set keys. The trainer is not included.
Any trainer that works with the game interface below can drive these games.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `holdem_gto.hand_classes`

Works with the 169 canonical starting-hand classes. Indices 0–12 are the pairs
from 22 to AA. Indices 13–90 are the suited hands and 91–168 the offsuit hands.

- `NUM_CLASSES` is 169. `RANKS` is `"23456789TJQKA"`.
- `class_index_to_name(index)` returns a name such as `"AA"`, `"AKs"` or
  `"72o"`. It raises `ValueError` for an index outside 0–168.
- `grid_class_index(row, col)` gives the class in a cell of a 13×13 chart.
  Pairs lie on the diagonal. Suited hands are the cells with `col > row`, and
  offsuit hands the cells with `row > col`.
- `class_combos(index)` returns the number of card combinations in a class:
  6 for a pair, 4 for a suited hand and 12 for an offsuit hand.
- `range_stats(freqs)` takes 169 frequencies and returns
  `(percent_of_all_hands, weighted_combos)`.

### `holdem_gto.actions`

- `ActionKind` lists the kinds of action: `FOLD`, `CHECK`, `CALL`, `RAISE` and
  `ALL_IN`.
- `Action` is a frozen dataclass. A raise carries an amount in tenths of a big
  blind. Only raises may carry an amount.
- `FOLD`, `CHECK`, `CALL` and `ALL_IN` are ready-made actions.
- `raise_action(amount_x10)` builds a raise. For example, `raise_action(25)` is
  a raise to 2.5bb.
- `history_to_string(history)` encodes a sequence of actions as a string.
  Actions encode as `f`, `x`, `c`, `r<amount>` and `a`, so a limp followed by a
  raise to 3.5bb becomes `"cr35"`.

### `holdem_gto.push_fold`

- `PushFoldData(equity, weights)` takes two 169×169 matrices and builds the
  cumulative distribution over deals. The last entry of that distribution is
  set to exactly 1.0. A matrix of the wrong shape raises `ValueError`.
  - `sample_index(r)` maps a number in `[0, 1)` to a `(class_0, class_1)` pair.
- `PushFoldGame(stack_bb, data)` is the push/fold game:
  - The small blind pushes or folds, and the big blind calls or folds.
  - When the small blind folds, it loses 0.5bb.
  - When the big blind folds to a push, it loses 1bb.
  - When the big blind calls, the small blind's value is `(2 * equity - 1) * stack_bb`.
  - The information-set key is the small blind's class name, or the big
    blind's class name followed by `"|a"`.
- `extract_push_range(strategy)` reads the probability at index 1 of each class
  key, which is the push frequency.
- `extract_call_range(strategy)` reads the same index from each `"<class>|a"`
  key, which is the call frequency.
- `format_chart(title, frequencies)` renders a 13×13 chart with a range summary
  line and returns it as text. `display_chart` prints that chart.

### `holdem_gto.preflop_config`

- `Position` is a 6-max seat: `UTG`, `HJ`, `CO`, `BTN`, `SB` or `BB`.
  - `blind()` gives the seat's blind: 0.5 for SB, 1.0 for BB and 0 for the
    other seats.
  - `defenders()` gives the seats left to act after this one.
- `all_openers()` returns the five seats that can open.
- `all_matchups()` returns the 15 `(opener, defender)` pairs.
- `PreflopConfig` holds the settings for one matchup:
  - the stack in big blinds;
  - the two seats;
  - the dead money, which is 1.5 minus the blinds of the two seats;
  - `raise_sizes`: the open, 3-bet and 4-bet sizes;
  - `limp_raise_sizes`: the raise sizes in the limp line;
  - `max_raises`, where 0 means unlimited.

  Its methods are:
  - `for_matchup` builds a config with the default sizes. The open is 2.5bb.
    The 3-bet and 4-bet are 9/22bb for UTG and HJ, 8.5/21bb for CO, and
    8/20bb for the later seats. The limp-line raises are 3.5bb and 10bb.
  - `for_position` builds a config for a seat against BB.
  - `default_for_stack` builds a config for SB against BB.
  - `with_max_raises` returns a copy with a new raise cap.
  - `can_limp` is true only for SB against BB.
  - `open_size`, `three_bet_size` and `four_bet_size` return those sizes.
  - `raise_size_for_level` and `limp_raise_size_for_level` return the size at a
    level. Past the configured sizes, each further level is 2.5 times the last
    configured size.
  - `effective_max_raises` returns the explicit cap, or 20 when the cap is 0.

### `holdem_gto.preflop`

`PreflopGame(config, data)` is the preflop tree for one matchup. Player 0 is
the opener and player 1 the defender. `PreflopState` records the dealt classes,
the action history and how much each player has put in.

The tree covers these lines:

- open, limp, fold and all-in;
- 3-bets, 4-bets and further raises up to the cap;
- the limp line of check, raise and reraise.

All-in is offered in two cases:

- the next raise would be at least 60% of the stack;
- no sized raise is available and the stack is 15bb or less.

The payoffs work as follows:

- At showdown the opener gets `equity * pot` minus what it put in, where the pot
  includes the dead money.
- A player who folds loses what they put in.
- The player who wins uncontested gets the opponent's chips plus the dead money.

### `holdem_gto.preflop_strategy`

- `extract_preflop_strategies(strategy, config)` slices a solved strategy into
  `PreflopStrategySet`s. There is one set for the opener's first action and one
  for each step of the raise line. For SB against BB there are also sets for
  the limp line. Each set holds a label, a history prefix, the action names and
  169 frequencies for each action.
- `raise_level_name(level)` returns `"Open"`, `"3bet"` and so on up to
  `"7bet"`, and `"Raise"` beyond that.
- `format_preflop_chart(label, action_name, freqs)` renders one action's
  frequencies as a chart. `display_preflop_chart` prints it.

### `holdem_gto.matchups`

- `MatchupResult` holds a solved matchup: the two seats, the config, the
  strategy sets and the exploitability.
- `summarize_opening_ranges(results)` averages each opener's open-raise
  frequencies over its matchups and returns one `OpeningRangeSummary` per
  opener.

### `holdem_gto.jobs`

- `JobStore` is a thread-safe store of job statuses.
  - `create(status)` adds a job and returns a new UUID string.
  - `update(job_id, status)` replaces the status of a job.
  - `get(job_id)` returns the status of a job.
  - `status_response(job_id)` builds a JSON-ready dict for the job. It raises
    `ApiError` with status 404 when the job is unknown.
- A job status is one of three kinds:
  - `Running` holds the progress text, the percentage, the current step and the
    total number of steps. A negative percentage means the progress is
    indeterminate.
  - `Completed` holds the result.
  - `Failed` holds the error.
- `ApiError` is an exception with an `HTTPStatus` and a message.
  - `bad_request`, `not_found` and `internal` build one with that status.
  - `to_json()` returns `{"error": message}`.

## The game interface

Both `PushFoldGame` and `PreflopGame` provide these methods:

- `initial_state()`
- `is_terminal(state)`
- `is_chance_node(state)`
- `chance_outcomes(state)`
- `sample_chance_outcome(state, rng)`
- `current_player(state)`
- `actions(state)`
- `apply_action(state, action)`
- `info_set_key(state, player)`
- `payoff(state, player)`

Each game also has `num_players`, which is 2.

A chance node deals a hand class to each player:

- `chance_outcomes` lists every pair with a positive weight, together with that
  weight.
- `sample_chance_outcome` draws one pair using `rng.random()`. The `rng` can be
  a `random.Random`.

A strategy is any mapping from an information-set key to a list of action
probabilities, for example `{"AA": [0.0, 1.0]}`.

## Example

```python
from holdem_gto.hand_classes import class_index_to_name
from holdem_gto.push_fold import PushFoldData, PushFoldGame, extract_push_range

n = 169
data = PushFoldData([[0.5] * n for _ in range(n)], [[1 / n**2] * n for _ in range(n)])
game = PushFoldGame(10.0, data)

state = game.initial_state()
dealt, weight = game.chance_outcomes(state)[0]
print(game.info_set_key(dealt, 0), [str(a) for a in game.actions(dealt)])  # 22 ['f', 'a']

strategy = {"AA": [0.0, 1.0]}
push = extract_push_range(strategy)
print(class_index_to_name(12), push[12])  # AA 1.0
```

## What this package does not do

- There is no CFR trainer and no exploitability calculation. Strategies come
  from a trainer that you supply.
- There is no hand evaluator. The package does not compute the equity matrix
  or the deal weights, so `PushFoldData` must be given both.
- There is no command-line program and no web server. `JobStore` and `ApiError`
  are the bookkeeping pieces of such a service, but no HTTP routes are
  included.
- No solver is run over all matchups. `MatchupResult` values are built from
  results you produce.