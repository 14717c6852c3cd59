"""xoshiro128++ 1.0: 128 bits of state, 32-bit outputs.

The 32-bit sibling of xoshiro256++ (https://prng.di.unimi.it). Seeds are still
expanded through the 64-bit splitmix64 mixer; each mixed value is truncated to
its low 32 bits to fill a state word.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from .bits import MASK32, MASK64, high32, join32, low32, rotl32
from .engine import STATE_WORDS, SeedSequence, XoshiroEngine
from .splitmix import splitmix64

logger = logging.getLogger(__name__)

DEFAULT_STATE = (0x1C588F8C, 0x3D23DCE4, 0x8DA027B0, 0x10C770BB)


@dataclass
class Xoshiro128PP(XoshiroEngine):
    """Four 32-bit state words; ``Xoshiro128PP()`` starts from a fixed state."""

    WORD_BITS = 32
    DEFAULT_STATE = DEFAULT_STATE
    WORD_FORMAT = "<I"

    state: List[int] = field(default_factory=lambda: list(DEFAULT_STATE))

    @classmethod
    def from_seed32(cls, seed: int) -> "Xoshiro128PP":
        engine = cls()
        engine.seed_u32(seed)
        return engine

    def seed_u64(self, seed: int) -> None:
        t1 = splitmix64(self._coerce_seed(seed, MASK64))
        t2 = splitmix64(t1)
        self.state = [
            low32(splitmix64(high32(t1))),
            low32(splitmix64(low32(t1))),
            low32(splitmix64(high32(t2))),
            low32(splitmix64(low32(t2))),
        ]
        logger.debug("Xoshiro128PP seeded from 64-bit integer")

    def seed_u32(self, seed: int) -> None:
        """Seed from a 32-bit value copied into both halves of a 64-bit seed."""
        half = self._coerce_seed(seed, MASK32)
        self.seed_u64(join32(half, half))

    def seed_state64(self, words: Iterable[int]) -> None:
        """Raw state given as two 64-bit words, low half first within each."""
        wide = self._check_words(words, STATE_WORDS // 2, 64)
        self.seed_state([half for word in wide for half in (low32(word), high32(word))])

    def seed_sequence(self, seq: SeedSequence) -> None:
        self.state = self._check_words(seq.generate_state(STATE_WORDS), STATE_WORDS, 32)
        logger.debug("Xoshiro128PP seeded from seed sequence")

    def next(self) -> int:
        s = self.state
        result = (rotl32((s[0] + s[3]) & MASK32, 7) + s[0]) & MASK32
        t = (s[1] << 9) & MASK32

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = rotl32(s[3], 11)

        return result
