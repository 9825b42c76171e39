"""
gasunit.encoding.text — decimal-string wire form for Gas.

Gas crosses JSON (and other string-oriented interchange formats) as a *quoted*
decimal string, e.g. "1000000000000": 64-bit integers are not exactly
representable as JSON numbers in every consumer (JS tops out at 2**53 - 1).

Encoding is canonical: no sign, no separators, no leading zeros except "0".
Decoding is strict: after removing surrounding quotes the text must be ASCII
digits only. Free-form input with separators belongs to `gasunit.parse`.

APIs
----
- to_text(gas) -> str          # 1000
- to_wire(gas) -> str          # "1000" (with quotes)
- from_text(s) -> Gas          # accepts 1000 or "1000"
- from_wire(doc) -> Gas        # a JSON document that must be a string
- json_default(obj)            # `default=` hook for json.dumps
- dumps(obj, **kw) -> str      # json.dumps with Gas values as quoted strings
"""

from __future__ import annotations

import json
import re
from typing import Any, Optional

from ..config import GasConfig, get_config
from ..errors import InvalidDigit, Overflow
from ..logging import get_logger
from ..types.gas import MAX_DECIMAL_DIGITS, U64_MAX, Gas

log = get_logger(__name__)

_DIGITS_RE = re.compile(r"[0-9]+")


# -------------------------------
# Encode
# -------------------------------


def to_text(gas: Gas) -> str:
    """Canonical decimal rendering of `gas.magnitude`."""
    if not isinstance(gas, Gas):
        raise TypeError(f"expected Gas, got {type(gas).__name__}")
    # magnitude is range-checked at construction, so this is at most
    # MAX_DECIMAL_DIGITS characters and cannot fail.
    return str(gas.magnitude)


def to_wire(gas: Gas) -> str:
    """JSON-style quoted decimal string."""
    return json.dumps(to_text(gas))


def json_default(obj: Any) -> Any:
    """`default=` hook so `json.dumps` writes Gas as a quoted decimal string."""
    if isinstance(obj, Gas):
        return to_text(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(obj: Any, **kwargs: Any) -> str:
    """`json.dumps` with Gas support; extra kwargs pass through."""
    kwargs.setdefault("default", json_default)
    return json.dumps(obj, **kwargs)


# -------------------------------
# Decode
# -------------------------------


def _unquote(s: str) -> str:
    if len(s) >= 2 and s[0] == '"' and s[-1] == '"':
        return s[1:-1]
    return s


def _decode_digits(s: str, cfg: GasConfig) -> Gas:
    if not s:
        log.debug("rejected gas text: empty")
        raise InvalidDigit("cannot parse gas from empty string")
    if not _DIGITS_RE.fullmatch(s):
        pos = next(i for i, ch in enumerate(s) if not ("0" <= ch <= "9"))
        log.debug("rejected gas text: non-digit", extra={"input": s[:32], "position": pos})
        raise InvalidDigit(
            f"gas text must be decimal digits only, found {s[pos]!r} at position {pos}",
            char=s[pos],
            position=pos,
        )
    if len(s) > 1 and s[0] == "0" and not cfg.codec.allow_leading_zeros:
        raise InvalidDigit("leading zeros are not allowed in gas text", char="0", position=0)

    significant = s.lstrip("0") or "0"
    if len(significant) > MAX_DECIMAL_DIGITS or int(significant) > U64_MAX:
        log.debug("rejected gas text: overflow", extra={"digits": len(s)})
        raise Overflow("gas text too large to fit in u64", data={"input": s[:64]})
    return Gas(int(significant))


def from_text(s: str, *, config: Optional[GasConfig] = None) -> Gas:
    """
    Decode a canonical decimal string, with or without surrounding quotes.

    Raises:
        TypeError:    `s` is not a str
        InvalidDigit: empty, or any non-digit content
        Overflow:     value exceeds 2**64 - 1
    """
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return _decode_digits(_unquote(s), config or get_config())


def from_wire(doc: str | bytes, *, config: Optional[GasConfig] = None) -> Gas:
    """
    Decode a JSON document holding a single quoted decimal string.

    JSON numbers are rejected: the interchange form is always a string.
    """
    try:
        value = json.loads(doc)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidDigit(f"gas wire value is not valid JSON: {e}") from e
    if not isinstance(value, str):
        log.debug("rejected gas wire value: not a string", extra={"type": type(value).__name__})
        raise InvalidDigit(
            f"expected a quoted decimal string, got {type(value).__name__}",
            data={"type": type(value).__name__},
        )
    return _decode_digits(value, config or get_config())


__all__ = [
    "to_text",
    "to_wire",
    "from_text",
    "from_wire",
    "json_default",
    "dumps",
]
