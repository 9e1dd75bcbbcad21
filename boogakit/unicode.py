"""UTF-16 and UTF-8 decoding of single code points and UTF-8 indexing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from boogakit.strings import string_view

UTF16_SURROGATE_HIGH_START = 0xD800
UTF16_SURROGATE_HIGH_END = 0xDBFF
UTF16_SURROGATE_LOW_START = 0xDC00
UTF16_SURROGATE_LOW_END = 0xDFFF
UTF16_SURROGATE_OFFSET = 0x10000

REPLACEMENT_CHARACTER = 0xFFFD
MAX_UTF32 = 0x7FFFFFFF
MAX_UNICODE = 0x10FFFF
SURROGATES_START = 0xD800
SURROGATES_END = 0xDFFF

_INITIAL_BYTE_MASK = (0x7F, 0x1F, 0x0F, 0x07, 0x03, 0x01)


@dataclass(frozen=True)
class Utf8Decode:
    """Result of decoding one UTF-8 sequence."""

    codepoint: int
    consumed: int
    reached_end: bool
    error: bool


def utf16_to_utf32(units: Sequence[int]) -> Tuple[int, int]:
    """Decode one code point from UTF-16 units; returns (code point, units used)."""
    if not units:
        raise ValueError("no UTF-16 units to decode")
    first = units[0]
    if UTF16_SURROGATE_HIGH_START <= first <= UTF16_SURROGATE_HIGH_END:
        if len(units) < 2:
            raise ValueError("high surrogate without a following unit")
        second = units[1]
        if not UTF16_SURROGATE_LOW_START <= second <= UTF16_SURROGATE_LOW_END:
            raise ValueError("high surrogate not followed by a low surrogate")
        codepoint = (
            ((first - UTF16_SURROGATE_HIGH_START) << 10)
            + (second - UTF16_SURROGATE_LOW_START)
            + UTF16_SURROGATE_OFFSET
        )
        return codepoint, 2
    if UTF16_SURROGATE_LOW_START <= first <= UTF16_SURROGATE_LOW_END:
        raise ValueError("unpaired low surrogate")
    return first, 1


def _trailing_bytes(lead: int) -> int:
    if lead < 0xC0:
        return 0
    if lead < 0xE0:
        return 1
    if lead < 0xF0:
        return 2
    if lead < 0xF8:
        return 3
    if lead < 0xFC:
        return 4
    return 5


def _decode(data: bytes, pos: int, strict: bool) -> Utf8Decode:
    available = len(data) - pos
    if available <= 0:
        raise ValueError("no UTF-8 bytes to decode")
    lead = data[pos]
    continuation = _trailing_bytes(lead)
    if continuation + 1 > available:
        return Utf8Decode(REPLACEMENT_CHARACTER, available, True, True)

    ch = lead & _INITIAL_BYTE_MASK[continuation]
    for offset, byte in enumerate(data[pos + 1:pos + 1 + continuation], start=1):
        ch <<= 6
        if strict and (byte & 0xC0) != 0x80:
            return Utf8Decode(REPLACEMENT_CHARACTER, offset - 1, True, True)
        ch |= byte & 0x3F

    if strict and (
        ch > MAX_UNICODE
        or SURROGATES_START <= ch <= SURROGATES_END
        or (ch <= 0x7F and continuation != 0)
        or (ch <= 0x7FF and continuation != 1)
        or (ch <= 0xFFFF and continuation != 2)
        or continuation > 3
    ):
        return Utf8Decode(REPLACEMENT_CHARACTER, continuation + 1, True, True)

    if ch > MAX_UTF32:
        ch = REPLACEMENT_CHARACTER
    return Utf8Decode(ch, continuation + 1, False, False)


def utf8_to_utf32(data: bytes, strict: bool = False) -> Utf8Decode:
    """Decode the code point at the start of ``data``.

    In strict mode malformed continuation bytes, overlong forms, surrogates
    and values beyond U+10FFFF are reported as errors.
    """
    return _decode(bytes(data), 0, strict)


def iter_utf8(data: bytes) -> Iterator[int]:
    """Yield the code points of ``data``; an incomplete trailing sequence yields 0 and ends."""
    data = bytes(data)
    pos = 0
    while pos < len(data):
        result = _decode(data, pos, False)
        pos += result.consumed
        if result.error:
            yield 0
            return
        yield result.codepoint


def utf8_index_to_byte_index(data: bytes, index: int) -> int:
    """Byte offset of the code point at ``index``; stops early at a NUL or a broken sequence."""
    data = bytes(data)
    byte_index = 0
    for _ in range(index):
        if byte_index >= len(data):
            break
        result = _decode(data, byte_index, False)
        if result.error or result.codepoint == 0:
            break
        byte_index += result.consumed
    return byte_index


def utf8_slice(data: bytes, index: int, count: int) -> bytes:
    """Bytes of ``count`` code points starting at code point ``index``."""
    start = utf8_index_to_byte_index(data, index)
    end = utf8_index_to_byte_index(data, index + count)
    return string_view(data, start, end - start)