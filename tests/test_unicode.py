import struct

import pytest

from boogakit.unicode import (
    REPLACEMENT_CHARACTER,
    iter_utf8,
    utf16_to_utf32,
    utf8_index_to_byte_index,
    utf8_slice,
    utf8_to_utf32,
)

SAMPLE_CHARS = ["A", "\u00e9", "\u20ac", "\U0001F600"]
SAMPLE_TEXT = "h\u00e9llo w\u00f6rld \u20ac\U0001F600"


@pytest.mark.parametrize("ch", SAMPLE_CHARS)
def test_utf8_round_trip(ch):
    encoded = ch.encode("utf-8")
    result = utf8_to_utf32(encoded, True)
    assert result.codepoint == ord(ch)
    assert result.consumed == len(encoded)
    assert not result.error
    assert not result.reached_end


@pytest.mark.parametrize("ch", SAMPLE_CHARS)
def test_utf16_round_trip(ch):
    raw = ch.encode("utf-16-le")
    units = list(struct.unpack(f"<{len(raw) // 2}H", raw))
    assert utf16_to_utf32(units) == (ord(ch), len(units))


@pytest.mark.parametrize("units", [[], [0xDC00], [0xD800], [0xD800, 0x41]])
def test_utf16_errors(units):
    with pytest.raises(ValueError):
        utf16_to_utf32(units)


def test_truncated_sequence():
    data = "\u20ac".encode("utf-8")[:2]
    result = utf8_to_utf32(data, False)
    assert result.codepoint == REPLACEMENT_CHARACTER
    assert result.consumed == len(data)
    assert result.reached_end
    assert result.error


def test_strict_rejects_overlong():
    strict = utf8_to_utf32(b"\xc0\x80", True)
    assert strict.error
    assert strict.codepoint == REPLACEMENT_CHARACTER
    assert not utf8_to_utf32(b"\xc0\x80", False).error


def test_strict_rejects_surrogate():
    result = utf8_to_utf32(b"\xed\xa0\x80", True)
    assert result.error
    assert result.codepoint == REPLACEMENT_CHARACTER


def test_strict_rejects_bad_continuation():
    result = utf8_to_utf32(b"\xe2\x41\x41", True)
    assert result.error
    assert result.consumed == 0


def test_empty_input_raises():
    with pytest.raises(ValueError):
        utf8_to_utf32(b"")


def test_iter_utf8_matches_text():
    assert list(iter_utf8(SAMPLE_TEXT.encode("utf-8"))) == [ord(c) for c in SAMPLE_TEXT]


def test_iter_utf8_truncated_tail():
    assert list(iter_utf8(b"a\xe2")) == [ord("a"), 0]


def test_index_to_byte_index():
    data = SAMPLE_TEXT.encode("utf-8")
    for k in range(len(SAMPLE_TEXT) + 1):
        assert utf8_index_to_byte_index(data, k) == len(SAMPLE_TEXT[:k].encode("utf-8"))
    assert utf8_index_to_byte_index(data, len(SAMPLE_TEXT) + 10) == len(data)


def test_index_stops_at_nul():
    data = b"ab\x00cd"
    assert utf8_index_to_byte_index(data, 4) == data.index(0)


def test_utf8_slice():
    data = SAMPLE_TEXT.encode("utf-8")
    assert utf8_slice(data, 1, 4) == SAMPLE_TEXT[1:5].encode("utf-8")
    assert utf8_slice(data, 12, 2) == SAMPLE_TEXT[12:14].encode("utf-8")


def test_utf8_slice_zero_count_raises():
    with pytest.raises(ValueError):
        utf8_slice(SAMPLE_TEXT.encode("utf-8"), 1, 0)