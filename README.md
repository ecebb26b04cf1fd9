# pokerhistory

Tools for poker records and tournament equity:

- **Open Hand History**: read, build and write hand histories in the
  Open Hand History JSON format (`pokerhistory.models`, `pokerhistory.enums`,
  `pokerhistory.writer`).
- **Dates**: RFC 3339 timestamp parsing and formatting used by the format
  (`pokerhistory.dates`).
- **Simulated ICM**: estimate what each chip stack is worth under a payout
  schedule by playing out random all-in showdowns (`pokerhistory.icm`).

The package uses only the standard library. It needs Python 3.11 or later.

## Installation

```
pip install pokerhistory
```

To install what the tests need as well:

```
pip install "pokerhistory[test]"
```

## Reading a hand history

```python
from pokerhistory.models import OpenHandHistoryWrapper

with open("hand.json", encoding="utf-8") as fh:
    wrapper = OpenHandHistoryWrapper.from_json(fh.read())

hand = wrapper.ohh
print(hand.site_name, hand.game_type, hand.big_blind_amount)
for round_ in hand.rounds:
    print(round_.street, round_.cards)
```

`OpenHandHistoryWrapper.from_json` takes one JSON document, as `str` or
`bytes`, with the hand under the `"ohh"` key. Every model class has
`from_dict` and `to_dict`. These are `SpeedObj`, `TournamentBountyObj`,
`TournamentInfoObj`, `PlayerWinsObj`, `PotObj`, `ActionObj`, `RoundObj`,
`PlayerObj`, `BetLimitObj`, `HandHistory` and `OpenHandHistoryWrapper`.
Missing required fields, values of the wrong type and unknown enum strings
raise `ValueError`.

Some details of reading:

- The `cards` of a round or an action, and the `flags` of a tournament, may
  be an empty string in place of a list. The empty string is read as
  `None`. Any other string is an error.
- Cards are kept as their text, such as `"As"`, and are not checked.
- `tournament` defaults to `False` when it is absent.
- Dates without a time zone are read as UTC. All dates become aware UTC
  `datetime` objects.

`OpenHandHistoryWrapper.to_json()` writes compact JSON. Absent optional
values are written as `null`, and dates are written with a `+00:00` offset.

## Enumerations

`pokerhistory.enums` holds `SpeedType`, `TournamentType`, `TournamentFlag`,
`Action`, `BetType`, `GameType` and `HandFlag`. Each is a `StrEnum`, and each
member's value is the exact string used in the format:

```python
from pokerhistory.enums import Action, BetType

Action("Post SB") is Action.POST_SMALL_BLIND  # True
BetType.NO_LIMIT.value                        # 'NL'
```

## Appending to a file

```python
from pokerhistory.writer import append_hand

append_hand("hands.ohh", hand)
```

Each hand is written as one compact JSON object, wrapped in `{"ohh": ...}`,
followed by a blank line. The file is created if it does not exist.

## Dates

```python
from pokerhistory.dates import parse_iso8601, format_iso8601

moment = parse_iso8601("2020-04-07T14:32:50")
format_iso8601(moment)  # '2020-04-07T14:32:50+00:00'
```

`parse_iso8601` raises `ValueError` on malformed or impossible timestamps,
such as a date with no time, month 13 or hour 25. `None` passes through both
functions unchanged. `empty_string_is_none` turns `""` into `None` and
returns other non-string values as they are.

## Simulated ICM

```python
import random
from pokerhistory.icm import simulate_icm_tournament

stacks = [1000, 600, 400]
payments = [100, 30, 10]
rng = random.Random()

totals = [0] * len(stacks)
trials = 10_000
for _ in range(trials):
    for seat, won in enumerate(simulate_icm_tournament(stacks, payments, rng)):
        totals[seat] += won

print([t / trials for t in totals])
```

Each call plays one tournament. `payments[0]` is the prize for first place.
Random pairs of remaining players go all in for the smaller of their two
stacks, and each side wins half of the time. Play goes on until one player is
left. Players earn the payment for the place in which they bust out. Places
beyond the payout schedule earn nothing. `rng` is optional; without it a
fresh `random.Random()` is used. An empty list of stacks or of payments
raises `ValueError`.

## What this package does not do

- It has no command-line tool; it is used from Python.
- It does not evaluate hands, rank cards or validate card text.
- It writes many hands to one file with `append_hand`, but has no function
  that reads such a file back. Split the file on blank lines yourself and pass
  each part to `OpenHandHistoryWrapper.from_json`.