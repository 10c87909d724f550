"""Small helpers shared by the nutrition and workout rule tables."""
from __future__ import annotations

import math


def round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def first_match(rules, members, default=None):
    """Return the outcome of the first rule whose key is in ``members``."""
    present = set(members)
    for key, outcome in rules:
        if key in present:
            return outcome
    return default
