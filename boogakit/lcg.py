"""A 64-bit linear congruential generator with a per-thread default instance."""

from __future__ import annotations

import struct
import threading

MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407
U64_MAX = 0xFFFFFFFFFFFFFFFF


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Lcg:
    """Fast, low-quality pseudo random numbers; fine for general purposes."""

    def __init__(self, seed: int = 1) -> None:
        self.seed = seed & U64_MAX

    def peek(self) -> int:
        """The next value, without advancing the generator."""
        return (self.seed * MULTIPLIER + INCREMENT) & U64_MAX

    def next(self) -> int:
        """Advance and return the new 64-bit value."""
        self.seed = self.peek()
        return self.seed

    def next_float32(self) -> float:
        """A single-precision value in [0, 1]."""
        return _f32(_f32(float(self.next())) / _f32(float(U64_MAX)))

    def next_float64(self) -> float:
        """A double-precision value in [0, 1]."""
        return float(self.next()) / float(U64_MAX)

    def float32_in_range(self, low: float, high: float) -> float:
        low32, high32 = _f32(low), _f32(high)
        span = _f32(high32 - low32)
        return _f32(_f32(span * self.next_float32()) + low32)

    def float64_in_range(self, low: float, high: float) -> float:
        return (high - low) * self.next_float64() + low

    def int_in_range(self, low: int, high: int) -> int:
        """An integer in [low, high], both ends included."""
        if high < low:
            raise ValueError(f"empty range [{low}, {high}]")
        return low + self.next() % (high - low + 1)


class _ThreadGenerator(threading.local):
    def __init__(self) -> None:
        self.generator = Lcg(1)


_local = _ThreadGenerator()


def default_generator() -> Lcg:
    """The calling thread's generator."""
    return _local.generator


def set_seed(seed: int) -> None:
    """Seed the calling thread's generator."""
    _local.generator.seed = seed & U64_MAX


def peek_random() -> int:
    """Like :func:`get_random` but without advancing the seed."""
    return _local.generator.peek()


def get_random() -> int:
    return _local.generator.next()