"""Score arithmetic shared by the policies."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, 12.5 -> 13).

    The builtin ``round`` uses banker's rounding, which would turn 12.5 into 12.
    """
    return int(math.floor(value + 0.5))
