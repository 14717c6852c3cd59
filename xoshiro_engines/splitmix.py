"""SplitMix64 finaliser used to expand short seeds into full engine state.

Fixed-increment variant of Java 8's SplittableRandom mixer
(http://dx.doi.org/10.1145/2714064.2660195). It keeps no state between calls;
callers chain outputs back in to derive successive words.
"""

from .bits import MASK64

GOLDEN_GAMMA = 0x9E3779B97F4A7C15


def splitmix64(x: int) -> int:
    """Map one 64-bit word to another, wrapping modulo 2**64."""
    z = (x + GOLDEN_GAMMA) & MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)
