"""
Scalar and tuple parsers for operator input.

Every parser takes already-trimmed text and either returns a value or raises
ParseError. Matching is case-sensitive: ``True`` is not a boolean.
"""

import ipaddress
import math
import re
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from configuranator.core.exceptions import ParseError

T = TypeVar("T")

ScalarParser = Callable[[str], T]

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_REAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ScalarKind(str, Enum):
    """Scalar types the prompt engine knows how to read"""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    REAL = "real number"
    IP_ADDRESS = "IP address"
    STRING = "string"


def parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ParseError(f"Expected 'true' or 'false', got {text!r}")


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer."""
    if not _INTEGER_RE.fullmatch(text):
        raise ParseError(f"Not an integer: {text!r}")
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ParseError(f"Integer out of range [{INT32_MIN}, {INT32_MAX}]: {text!r}")
    return value


def parse_real(text: str) -> float:
    """Parse a finite decimal number such as ``12``, ``-0.5`` or ``1e3``."""
    if not _REAL_RE.fullmatch(text):
        raise ParseError(f"Not a number: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ParseError(f"Number out of range: {text!r}")
    return value


def parse_ip(text: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    try:
        return ipaddress.ip_address(text)
    except ValueError as e:
        raise ParseError(str(e)) from e


def parse_str(text: str) -> str:
    return text


SCALAR_PARSERS: dict[ScalarKind, ScalarParser[Any]] = {
    ScalarKind.BOOLEAN: parse_bool,
    ScalarKind.INTEGER: parse_int,
    ScalarKind.REAL: parse_real,
    ScalarKind.IP_ADDRESS: parse_ip,
    ScalarKind.STRING: parse_str,
}


def parse_tuple(text: str, parse_one: ScalarParser[T] = parse_real) -> tuple[T, T]:
    """
    Parse ``"a, b"`` into a pair using ``parse_one`` for each half.

    Args:
        text: Raw operator input
        parse_one: Parser applied to each trimmed segment

    Raises:
        ParseError: If there are not exactly two segments or a segment
            does not parse
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise ParseError(
            f"Invalid tuple: expected two comma-separated values, got '{text}'"
        )
    try:
        first = parse_one(parts[0].strip())
    except ParseError as e:
        raise ParseError("Error parsing first value", details={'cause': e.message}) from e
    try:
        second = parse_one(parts[1].strip())
    except ParseError as e:
        raise ParseError("Error parsing second value", details={'cause': e.message}) from e
    return first, second
