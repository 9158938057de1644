"""Small numeric helpers"""
import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (``round`` uses banker's rounding)."""
    return int(math.floor(value + 0.5))
