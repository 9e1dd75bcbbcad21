"""Sorting helpers, interpolation and angle conversion."""

from __future__ import annotations

import heapq
import math
from functools import cmp_to_key
from itertools import chain
from typing import Any, Callable, List, Optional, TypeVar

T = TypeVar("T")

PI32 = 3.14159265359
PI64 = math.pi
TAU32 = 2.0 * PI32
TAU64 = 2.0 * PI64
RAD_PER_DEG = PI64 / 180.0
DEG_PER_RAD = 180.0 / PI64

_U64 = (1 << 64) - 1
_RADIX = 256
_BITS_PER_PASS = 8


def radix_sort(items: List[T], number_of_bits: int, key: Optional[Callable[[T], int]] = None) -> None:
    """Stable in-place sort of ``items`` by the low ``number_of_bits`` of an integer key.

    Keys are treated as signed: half the range of the bits is added before
    sorting, so small negative keys sort before positive ones.
    """
    if not 1 <= number_of_bits <= 64:
        raise ValueError("number_of_bits must be between 1 and 64")
    get_key = key if key is not None else (lambda item: item)
    half_range = 1 << (number_of_bits - 1)
    passes = (number_of_bits + _BITS_PER_PASS - 1) // _BITS_PER_PASS
    for pass_index in range(passes):
        shift = pass_index * _BITS_PER_PASS
        buckets: List[List[T]] = [[] for _ in range(_RADIX)]
        for item in items:
            value = (int(get_key(item)) + half_range) & _U64
            buckets[(value >> shift) & (_RADIX - 1)].append(item)
        items[:] = chain.from_iterable(buckets)


def merge_sort(items: List[T], compare: Callable[[T, T], int]) -> None:
    """Stable bottom-up in-place merge sort using a three-way ``compare``."""
    sort_key = cmp_to_key(compare)
    count = len(items)
    width = 1
    while width < count:
        merged: List[T] = []
        for start in range(0, count, 2 * width):
            middle = min(start + width, count)
            end = min(start + 2 * width, count)
            merged.extend(heapq.merge(items[start:middle], items[middle:end], key=sort_key))
        items[:] = merged
        width *= 2


def clamp(x: Any, low: Any, high: Any) -> Any:
    if x < low:
        return low
    if x > high:
        return high
    return x


def to_radians(degrees: float) -> float:
    return degrees * RAD_PER_DEG


def to_degrees(radians: float) -> float:
    return radians * DEG_PER_RAD


def lerp(start: float, end: float, x: float) -> float:
    return (end - start) * x + start


def lerpi(start: int, end: int, x: float) -> int:
    """Integer interpolation, truncated toward zero."""
    return int(round(float(end) - float(start)) * x + start)


def _smooth(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def smerp(start: float, end: float, t: float) -> float:
    """Smoothstep interpolation."""
    return lerp(start, end, _smooth(t))


def smerpi(start: int, end: int, t: float) -> int:
    return lerpi(start, end, _smooth(t))


def sine_oscillate_n_waves_normalized(v: float, n: float) -> float:
    """Sine wave with ``n`` periods over a unit of ``v``, scaled by one half."""
    return math.sin(n * 2 * PI32 * (v - 1 / (n * 4)) + 1) / 2