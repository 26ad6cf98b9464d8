"""Small numeric helpers shared across modules."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded toward +infinity.

    Python's ``round()`` rounds halves to even; display values and file
    names here follow the conventional half-up rule instead.
    """
    return math.floor(value + 0.5)
