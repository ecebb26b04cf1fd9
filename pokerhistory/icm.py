"""Monte Carlo estimation of tournament payouts from chip stacks.

Players are paired off at random into all-in showdowns that each side wins
with even odds. Players are placed as they bust, and the last one standing
takes first place. Results vary from run to run, but the cost grows slowly
with the field, so large fields and long payout tables stay tractable.
"""

from __future__ import annotations

import random
from collections.abc import Sequence


def simulate_icm_tournament(
    chip_stacks: Sequence[int],
    payments: Sequence[int],
    rng: random.Random | None = None,
) -> list[int]:
    """Play one simulated tournament and return each player's winnings.

    ``chip_stacks[i]`` is player ``i``'s stack and ``payments[p]`` is the prize
    for finishing in place ``p`` (0 is first). Places beyond the end of
    ``payments`` win nothing.
    """
    if not chip_stacks:
        raise ValueError("at least one player is required")
    if not payments:
        raise ValueError("at least one payment is required")
    rng = rng if rng is not None else random.Random()

    stacks = list(chip_stacks)
    winnings = [0] * len(stacks)
    next_place = len(stacks) - 1
    remaining = list(range(len(stacks)))

    def bust(player: int) -> None:
        nonlocal next_place
        if 0 <= next_place < len(payments):
            winnings[player] = payments[next_place]
        next_place -= 1

    while remaining:
        rng.shuffle(remaining)
        hero = remaining.pop()

        if not remaining:
            winnings[hero] = payments[next_place]
            break

        villain = remaining.pop()
        effective = min(stacks[hero], stacks[villain])
        change = effective if rng.random() < 0.5 else -effective
        stacks[hero] += change
        stacks[villain] -= change

        for player in (hero, villain):
            if stacks[player] == 0:
                bust(player)
            else:
                remaining.append(player)

    return winnings