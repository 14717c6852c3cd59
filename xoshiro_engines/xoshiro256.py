"""xoshiro256++ 1.0: 256 bits of state, 64-bit outputs.

Blackman and Vigna's all-purpose generator (https://prng.di.unimi.it),
released to the public domain. Not suitable for cryptographic use.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .bits import MASK64, join32, rotl64
from .engine import STATE_WORDS, SeedSequence, XoshiroEngine
from .splitmix import splitmix64

logger = logging.getLogger(__name__)

DEFAULT_STATE = (
    0x3D23DCE41C588F8C,
    0x10C770BB8DA027B0,
    0xC7A4C5E87C63BA25,
    0xA830F83239465A2E,
)


@dataclass
class Xoshiro256PP(XoshiroEngine):
    """Four 64-bit state words; ``Xoshiro256PP()`` starts from a fixed state."""

    WORD_BITS = 64
    DEFAULT_STATE = DEFAULT_STATE
    WORD_FORMAT = "<Q"

    state: List[int] = field(default_factory=lambda: list(DEFAULT_STATE))

    def seed_u64(self, seed: int) -> None:
        """Expand one 64-bit seed by chaining splitmix64 through the state."""
        word = splitmix64(splitmix64(self._coerce_seed(seed, MASK64)))
        state = [word]
        for _ in range(STATE_WORDS - 1):
            word = splitmix64(word)
            state.append(word)
        self.state = state
        logger.debug("Xoshiro256PP seeded from integer")

    def seed_sequence(self, seq: SeedSequence) -> None:
        # eight 32-bit words, paired little-endian into four 64-bit words
        words = self._check_words(seq.generate_state(2 * STATE_WORDS), 2 * STATE_WORDS, 32)
        self.state = [join32(words[2 * i + 1], words[2 * i]) for i in range(STATE_WORDS)]
        logger.debug("Xoshiro256PP seeded from seed sequence")

    def next(self) -> int:
        s = self.state
        result = (rotl64((s[0] + s[3]) & MASK64, 23) + s[0]) & MASK64
        t = (s[1] << 17) & MASK64

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = rotl64(s[3], 45)

        return result
