import math


INF = math.inf

# Substituted for a zero box parameter so callers never divide by it.
EPSILON = 1e-6


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
