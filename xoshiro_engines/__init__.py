"""Public package surface for the xoshiro++ engines."""

from .bits import high32, join32, low32, rotl32, rotl64
from .engine import SeedSequence, StateFormatError, XoshiroEngine
from .splitmix import splitmix64
from .stream import ENGINES, StreamConfig, build_engine, run_stream
from .xoshiro128 import Xoshiro128PP
from .xoshiro256 import Xoshiro256PP

__all__ = [
    "ENGINES",
    "SeedSequence",
    "StateFormatError",
    "StreamConfig",
    "Xoshiro128PP",
    "Xoshiro256PP",
    "XoshiroEngine",
    "build_engine",
    "high32",
    "join32",
    "low32",
    "rotl32",
    "rotl64",
    "run_stream",
    "splitmix64",
]
