"""Fixed-width word helpers shared by the seed mixer and both engines."""

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1


def rotl64(x: int, k: int) -> int:
    """Rotate a 64-bit word left by ``k`` bits (0 < k < 64)."""
    return ((x << k) | (x >> (64 - k))) & MASK64


def rotl32(x: int, k: int) -> int:
    """Rotate a 32-bit word left by ``k`` bits (0 < k < 32)."""
    return ((x << k) | (x >> (32 - k))) & MASK32


def high32(x: int) -> int:
    """Upper half of a 64-bit word."""
    return (x >> 32) & MASK32


def low32(x: int) -> int:
    """Lower half of a 64-bit word."""
    return x & MASK32


def join32(high: int, low: int) -> int:
    """Inverse of ``high32``/``low32``: rebuild a 64-bit word from its halves."""
    return ((high & MASK32) << 32) | (low & MASK32)
