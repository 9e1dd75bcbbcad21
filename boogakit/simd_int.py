"""Lane-wise 32-bit integer arithmetic and single-precision dot products."""

from __future__ import annotations

from typing import Callable, Collection, Iterable

import numpy as np

_LANE_BITS = 32
_INT_WIDTHS = frozenset({128, 256, 512})
_DOT_WIDTHS = frozenset({64, 96, 128})


def _lanes(bits: int, allowed: Collection[int]) -> int:
    if bits not in allowed:
        widths = ", ".join(str(width) for width in sorted(allowed))
        raise ValueError(f"unsupported vector width {bits} bits; expected one of {widths}")
    return bits // _LANE_BITS


def _load(values: Iterable, lanes: int, dtype: type) -> np.ndarray:
    array = np.asarray(values)
    if array.ndim != 1:
        raise ValueError("expected a one-dimensional sequence")
    if array.size < lanes:
        raise ValueError(f"expected at least {lanes} values, got {array.size}")
    if dtype is np.int64:
        # Reinterpret as 32-bit lanes first so out-of-range inputs wrap.
        return array[:lanes].astype(np.int64).astype(np.int32).astype(np.int64)
    return array[:lanes].astype(dtype)


def _binary_int(
    a: Iterable[int],
    b: Iterable[int],
    bits: int,
    operation: Callable[[np.ndarray, np.ndarray], np.ndarray],
) -> np.ndarray:
    lanes = _lanes(bits, _INT_WIDTHS)
    left = _load(a, lanes, np.int64)
    right = _load(b, lanes, np.int64)
    # Results wrap to 32 bits, keeping the low half of each lane.
    return operation(left, right).astype(np.int32)


def add_int32(a: Iterable[int], b: Iterable[int], bits: int = 128) -> np.ndarray:
    """Lane-wise wrapping ``a + b`` over the first ``bits / 32`` values."""
    return _binary_int(a, b, bits, np.add)


def sub_int32(a: Iterable[int], b: Iterable[int], bits: int = 128) -> np.ndarray:
    """Lane-wise wrapping ``a - b`` over the first ``bits / 32`` values."""
    return _binary_int(a, b, bits, np.subtract)


def mul_int32(a: Iterable[int], b: Iterable[int], bits: int = 128) -> np.ndarray:
    """Lane-wise ``a * b`` keeping the low 32 bits of each product."""
    return _binary_int(a, b, bits, np.multiply)


def dot_product_float32(a: Iterable[float], b: Iterable[float], bits: int = 128) -> float:
    """Single-precision dot product of the first 2, 3 or 4 values (64, 96 or 128 bits)."""
    lanes = _lanes(bits, _DOT_WIDTHS)
    left = _load(a, lanes, np.float32)
    right = _load(b, lanes, np.float32)
    total = np.float32(0.0)
    with np.errstate(over="ignore", invalid="ignore"):
        for product in left * right:
            total = np.float32(total + product)
    return float(total)