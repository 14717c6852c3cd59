"""Behaviour shared by the xoshiro++ engines.

Each concrete engine is a dataclass holding ``state``: four unsigned words of
``WORD_BITS`` bits. Subclasses supply the recurrence (``next``), the integer
seeding path and the seed-sequence packing; everything else lives here.

The all-zero state is absorbing: an engine loaded with it emits 0 forever.
Mixer-based seeding cannot realistically produce it, but raw state and
deserialized bytes are taken as given so the streams stay bit-exact with the
reference generators.
"""

import logging
import operator
import struct
from typing import BinaryIO, ClassVar, Iterable, List, Protocol, Sequence, Tuple

logger = logging.getLogger(__name__)

STATE_WORDS = 4
SEPARATOR = b" "


class StateFormatError(ValueError):
    """Serialized engine state has the wrong size."""


class SeedSequence(Protocol):
    """Anything able to fill ``n_words`` 32-bit words with entropy.

    ``numpy.random.SeedSequence`` satisfies this protocol unchanged.
    """

    def generate_state(self, n_words: int) -> Sequence[int]:
        ...


class XoshiroEngine:
    """Uniform integer generator contract common to both engines."""

    WORD_BITS: ClassVar[int]
    DEFAULT_STATE: ClassVar[Tuple[int, ...]]
    WORD_FORMAT: ClassVar[str]

    state: List[int]

    def __post_init__(self) -> None:
        self.state = self._check_words(self.state, STATE_WORDS, self.WORD_BITS)

    # -- construction ------------------------------------------------------

    @classmethod
    def from_seed(cls, seed: int):
        engine = cls()
        engine.seed_u64(seed)
        return engine

    @classmethod
    def from_seed_sequence(cls, seq: SeedSequence):
        engine = cls()
        engine.seed_sequence(seq)
        return engine

    @classmethod
    def from_bytes(cls, data: bytes):
        """Rebuild an engine from the output of ``to_bytes``."""
        engine = cls()
        engine.state = cls._unpack(data)
        return engine

    # -- seeding -----------------------------------------------------------

    def seed(self, value) -> None:
        """Re-seed in place from an int, a seed sequence or raw state words."""
        if isinstance(value, int):
            self.seed_u64(value)
        elif hasattr(value, "generate_state"):
            self.seed_sequence(value)
        else:
            self.seed_state(value)

    def seed_u64(self, seed: int) -> None:
        raise NotImplementedError

    def seed_sequence(self, seq: SeedSequence) -> None:
        raise NotImplementedError

    def seed_state(self, words: Iterable[int]) -> None:
        """Copy four raw words into the state without mixing.

        All zeros is accepted and yields the degenerate all-zero stream.
        """
        self.state = self._check_words(words, STATE_WORDS, self.WORD_BITS)
        logger.debug("%s seeded from raw state", type(self).__name__)

    # -- generation --------------------------------------------------------

    def min(self) -> int:
        return 0

    def max(self) -> int:
        return (1 << self.WORD_BITS) - 1

    def next(self) -> int:
        raise NotImplementedError

    def __call__(self) -> int:
        return self.next()

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next()

    def discard(self, count: int) -> None:
        """Advance by ``count`` steps, one recurrence step at a time."""
        if count < 0:
            raise ValueError(f"discard count must be non-negative, got {count}")
        for _ in range(count):
            self.next()

    # -- serialization -----------------------------------------------------

    @classmethod
    def serialized_size(cls) -> int:
        return STATE_WORDS * (cls.WORD_BITS // 8) + (STATE_WORDS - 1) * len(SEPARATOR)

    def to_bytes(self) -> bytes:
        """Little-endian words in index order, one space byte between words."""
        return SEPARATOR.join(struct.pack(self.WORD_FORMAT, word) for word in self.state)

    def dump(self, fp: BinaryIO) -> None:
        fp.write(self.to_bytes())

    def load(self, fp: BinaryIO) -> None:
        """Read exactly one serialized state from ``fp`` into this engine.

        A short read raises ``StateFormatError`` and leaves the state as it was.
        """
        data = fp.read(self.serialized_size())
        self.state = self._unpack(data)
        logger.debug("%s restored from stream", type(self).__name__)

    @classmethod
    def _unpack(cls, data: bytes) -> List[int]:
        expected = cls.serialized_size()
        if len(data) != expected:
            raise StateFormatError(
                f"{cls.__name__} state is {expected} bytes, got {len(data)}"
            )
        stride = cls.WORD_BITS // 8 + len(SEPARATOR)
        # separator bytes are skipped, not checked
        return [
            struct.unpack_from(cls.WORD_FORMAT, data, index * stride)[0]
            for index in range(STATE_WORDS)
        ]

    # -- helpers -----------------------------------------------------------

    @staticmethod
    def _coerce_seed(seed: int, mask: int) -> int:
        try:
            return operator.index(seed) & mask
        except TypeError as exc:
            raise ValueError(f"seed must be an integer, got {type(seed).__name__}") from exc

    @staticmethod
    def _check_words(words: Iterable[int], count: int, bits: int) -> List[int]:
        try:
            checked = [operator.index(word) for word in words]
        except TypeError as exc:
            raise ValueError("state words must be integers") from exc

        if len(checked) != count:
            raise ValueError(f"expected {count} state words, got {len(checked)}")
        limit = 1 << bits
        for word in checked:
            if not 0 <= word < limit:
                raise ValueError(f"state word {word:#x} does not fit in {bits} bits")
        return checked
