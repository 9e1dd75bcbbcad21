"""Lane-wise single-precision arithmetic on vectors of 64 to 512 bits."""

from __future__ import annotations

from typing import Callable, Collection, Iterable

import numpy as np

_LANE_BITS = 32
_BINARY_WIDTHS = frozenset({64, 128, 256, 512})
_UNARY_WIDTHS = frozenset({64, 96, 128, 256, 512})


def _lanes(bits: int, allowed: Collection[int]) -> int:
    if bits not in allowed:
        widths = ", ".join(str(width) for width in sorted(allowed))
        raise ValueError(f"unsupported vector width {bits} bits; expected one of {widths}")
    return bits // _LANE_BITS


def _load(values: Iterable[float], lanes: int) -> np.ndarray:
    array = np.asarray(values, dtype=np.float32)
    if array.ndim != 1:
        raise ValueError("expected a one-dimensional sequence of floats")
    if array.size < lanes:
        raise ValueError(f"expected at least {lanes} values, got {array.size}")
    return array[:lanes]


def _binary(
    a: Iterable[float],
    b: Iterable[float],
    bits: int,
    operation: Callable[[np.ndarray, np.ndarray], np.ndarray],
) -> np.ndarray:
    lanes = _lanes(bits, _BINARY_WIDTHS)
    left = _load(a, lanes)
    right = _load(b, lanes)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return operation(left, right).astype(np.float32)


def _unary(
    a: Iterable[float],
    bits: int,
    operation: Callable[[np.ndarray], np.ndarray],
) -> np.ndarray:
    lanes = _lanes(bits, _UNARY_WIDTHS)
    values = _load(a, lanes).astype(np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return operation(values).astype(np.float32)


def add_float32(a: Iterable[float], b: Iterable[float], bits: int = 128) -> np.ndarray:
    """Lane-wise ``a + b`` over the first ``bits / 32`` values of each input."""
    return _binary(a, b, bits, np.add)


def sub_float32(a: Iterable[float], b: Iterable[float], bits: int = 128) -> np.ndarray:
    """Lane-wise ``a - b`` over the first ``bits / 32`` values of each input."""
    return _binary(a, b, bits, np.subtract)


def mul_float32(a: Iterable[float], b: Iterable[float], bits: int = 128) -> np.ndarray:
    """Lane-wise ``a * b`` over the first ``bits / 32`` values of each input."""
    return _binary(a, b, bits, np.multiply)


def div_float32(a: Iterable[float], b: Iterable[float], bits: int = 128) -> np.ndarray:
    """Lane-wise ``a / b``; division by zero gives infinities or NaN as in IEEE arithmetic."""
    return _binary(a, b, bits, np.divide)


def sqrt_float32(a: Iterable[float], bits: int = 128) -> np.ndarray:
    """Lane-wise square root; 96 bits covers three lanes. Negative lanes give NaN."""
    return _unary(a, bits, np.sqrt)


def rsqrt_float32(a: Iterable[float], bits: int = 128) -> np.ndarray:
    """Lane-wise reciprocal square root; zero lanes give infinity."""
    return _unary(a, bits, lambda values: 1.0 / np.sqrt(values))