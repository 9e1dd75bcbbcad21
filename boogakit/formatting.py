"""printf-style formatting with extra specifiers, printing and logging."""

from __future__ import annotations

import math
import re
import struct
import sys
from enum import IntEnum
from typing import Any, Callable, Iterator, Optional

PRINT_BUFFER_SIZE = 4096

_CONVERSIONS = "diuoxXfFeEgGaAcCpn%"
_SPEC = re.compile(
    r"(?P<flags>[-+ #0]*)(?P<width>\*|\d+)?(?:\.(?P<precision>\*|\d*))?"
    r"(?P<length>hh|h|ll|l|L|q|j|z|t|I64|I32|I)?"
)
_U64 = (1 << 64) - 1


class LogLevel(IntEnum):
    VERBOSE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


Logger = Callable[[LogLevel, str], Any]
_logger: Optional[Logger] = None


def _next(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _fixed_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    return _c_string(value)


def _c_string(value: Any) -> str:
    if isinstance(value, str):
        return value.split("\0", 1)[0]
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).split(b"\0", 1)[0].decode("utf-8", "replace")
    raise TypeError(f"expected a string argument, got {type(value).__name__}")


def _float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _vector(value: Any, size: int) -> str:
    names = "xyzw"[:size]
    if all(hasattr(value, name) for name in names):
        components = [getattr(value, name) for name in names]
    else:
        components = list(value)
    if len(components) != size:
        raise ValueError(f"%v{size} expects {size} components, got {len(components)}")
    fields = ", ".join(
        f"{name.upper()}: " + "%f" % _float32(float(component))
        for name, component in zip(names, components)
    )
    return "{ " + fields + " }"


def _integer_bits(length: str) -> int:
    if length == "hh":
        return 8
    if length == "h":
        return 16
    if length in ("ll", "q", "j", "z", "t", "I64", "I", "L"):
        return 64
    return 32


def _printf(flags: str, width: int, precision: Optional[int], conversion: str, value: Any) -> str:
    spec = "%" + flags + (str(width) if width else "")
    if precision is not None:
        spec += f".{precision}"
    return (spec + conversion) % (value,)


def _pad(text: str, width: int, flags: str, zero_ok: bool = False) -> str:
    if "-" in flags:
        return text.ljust(width)
    if zero_ok and "0" in flags:
        return text.rjust(width, "0")
    return text.rjust(width)


def _hex_float(value: float, upper: bool, flags: str) -> str:
    if math.isnan(value):
        text = "nan"
    elif math.isinf(value):
        text = "-inf" if value < 0 else "inf"
    else:
        mantissa, exponent = value.hex().split("p")
        if "." in mantissa:
            mantissa = mantissa.rstrip("0").rstrip(".")
        text = f"{mantissa}p{exponent}"
    if not text.startswith("-"):
        if "+" in flags:
            text = "+" + text
        elif " " in flags:
            text = " " + text
    return text.upper() if upper else text


def _standard(spec: str, conversion: str, args: Iterator[Any]) -> str:
    match = _SPEC.fullmatch(spec)
    if match is None:
        raise ValueError(f"invalid format specifier %{spec}{conversion}")
    if conversion == "%":
        return "%"

    flags = match["flags"]
    raw_width = match["width"]
    if raw_width == "*":
        width = int(_next(args))
        if width < 0:
            flags += "-"
            width = -width
    else:
        width = int(raw_width) if raw_width else 0

    raw_precision = match["precision"]
    precision: Optional[int]
    if raw_precision == "*":
        precision = int(_next(args))
        if precision < 0:
            precision = None
    elif raw_precision is not None:
        precision = int(raw_precision) if raw_precision else 0
    else:
        precision = None

    if conversion == "n":
        raise ValueError("%n is not supported")

    value = _next(args)
    bits = _integer_bits(match["length"] or "")
    mask = (1 << bits) - 1

    if conversion in "di":
        number = int(value) & mask
        if number >> (bits - 1):
            number -= 1 << bits
        return _printf(flags, width, precision, "d", number)
    if conversion in "uoxX":
        number = int(value) & mask
        if conversion == "o" and "#" in flags:
            body = _printf("", 0, precision, "o", number)
            if not body.startswith("0"):
                body = "0" + body
            return _pad(body, width, flags, zero_ok=precision is None)
        if number == 0:
            flags = flags.replace("#", "")
        return _printf(flags, width, precision, "d" if conversion == "u" else conversion, number)
    if conversion in "fFeEgG":
        return _printf(flags, width, precision, conversion, float(value))
    if conversion in "aA":
        return _pad(_hex_float(float(value), conversion == "A", flags), width, flags)
    if conversion in "cC":
        char = value if isinstance(value, str) else chr(int(value))
        return _printf(flags.replace("0", ""), width, None, "c", char)
    if conversion == "s":
        return _printf(flags.replace("0", ""), width, precision, "s", _c_string(value))
    # conversion == "p"
    return _pad(f"{int(value) & _U64:016X}", width, flags)


def format_string(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with ``args``.

    Besides the usual printf conversions this understands ``%s`` (string),
    ``%cs`` (NUL-terminated string), ``%b`` (bool) and ``%v2``/``%v3``/``%v4``
    (vectors of floats).
    """
    out = []
    remaining = iter(args)
    pos = 0
    end = len(fmt)
    while pos < end:
        percent = fmt.find("%", pos)
        if percent < 0:
            out.append(fmt[pos:])
            break
        out.append(fmt[pos:percent])
        pos = percent + 1
        if fmt.startswith("s", pos):
            out.append(_fixed_string(_next(remaining)))
            pos += 1
        elif fmt.startswith("cs", pos):
            out.append(_c_string(_next(remaining)))
            pos += 2
        elif fmt.startswith("b", pos):
            out.append("true" if _next(remaining) else "false")
            pos += 1
        elif fmt.startswith(("v2", "v3", "v4"), pos):
            out.append(_vector(_next(remaining), int(fmt[pos + 1])))
            pos += 2
        else:
            conv = pos
            while conv < end and fmt[conv] not in _CONVERSIONS:
                conv += 1
            if conv == end:
                raise ValueError(f"incomplete format specifier {fmt[percent:]!r}")
            out.append(_standard(fmt[pos:conv], fmt[conv], remaining))
            pos = conv + 1
    return "".join(out)


def format_truncated(fmt: str, buffer_size: int, *args: Any) -> str:
    """Format like :func:`format_string`, keeping at most ``buffer_size - 1`` characters."""
    if buffer_size < 1:
        raise ValueError("buffer_size must be at least 1")
    return format_string(fmt, *args)[:buffer_size - 1]


def prints(fmt: str, *args: Any) -> None:
    """Format and write to standard output, in chunks of the print buffer size."""
    step = PRINT_BUFFER_SIZE - 1
    for start in range(0, len(fmt), step):
        sys.stdout.write(format_truncated(fmt[start:start + step], PRINT_BUFFER_SIZE, *args))


def builder_print(builder: Any, fmt: str, *args: Any) -> None:
    """Format and append the result to a string builder."""
    builder.append(format_string(fmt, *args))


def set_logger(logger: Optional[Logger]) -> Optional[Logger]:
    """Install ``logger`` (called with level and message); returns the previous one."""
    global _logger
    previous, _logger = _logger, logger
    return previous


def log_message(level: LogLevel, fmt: str, *args: Any) -> None:
    """Format and send a message to the installed logger, if any."""
    logger = _logger
    if logger is not None:
        logger(LogLevel(level), format_string(fmt, *args))


def log_verbose(fmt: str, *args: Any) -> None:
    log_message(LogLevel.VERBOSE, fmt, *args)


def log_info(fmt: str, *args: Any) -> None:
    log_message(LogLevel.INFO, fmt, *args)


def log_warning(fmt: str, *args: Any) -> None:
    log_message(LogLevel.WARNING, fmt, *args)


def log_error(fmt: str, *args: Any) -> None:
    log_message(LogLevel.ERROR, fmt, *args)