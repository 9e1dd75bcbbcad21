"""Fast natural logarithm approximation from float bit manipulation."""

from __future__ import annotations

import struct

_LN2 = 0.6931471806
_ONE_BITS = 127 << 23
_MANTISSA_MASK = (1 << 23) - 1


def _float_bits(x: float) -> int:
    return struct.unpack("<I", struct.pack("<f", x))[0]


def _bits_float(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def ln(x: float) -> float:
    """Approximate natural log of a positive, normal single-precision value.

    Splits x = m * 2**p with m in [1, 2) and evaluates a third-order minimax
    polynomial for ln(m).
    """
    bits = _float_bits(x)
    exponent = (bits >> 23) - 127
    m = _bits_float(_ONE_BITS | (bits & _MANTISSA_MASK))
    result = -1.49278 + (2.11263 + (-0.729104 + 0.10969 * m) * m) * m + _LN2 * exponent
    return struct.unpack("<f", struct.pack("<f", result))[0]