import math


def sign(x):
    """Sign of a non-zero integer: 1 or -1."""
    return 1 if x > 0 else -1


def lcm(x, y):
    """Least common multiple of two integers, non-negative."""
    x = abs(x)
    y = abs(y)
    if x == 0 or y == 0:
        return 0
    return x * (y // math.gcd(x, y))
