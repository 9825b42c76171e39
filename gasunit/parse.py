"""
gasunit.parse — free-form numeral parser for human-entered gas amounts.

Accepts numerals with digit-group separators ("1_000_000_000_000") as written in
configs, fixtures and operator input. This is deliberately distinct from the wire
decoder in `gasunit.encoding.text`, which only accepts canonical digit strings.

Rules
-----
1. The first character must be an ASCII digit, otherwise InvalidDigit.
2. Separator characters (default "_", see `gasunit.config.ParseOptions`) are
   deleted before interpretation. They carry no value.
3. Whatever remains must be ASCII digits only, otherwise InvalidDigit.
4. The numeral is read as base 10; above 2**64 - 1 it raises Overflow.
"""

from __future__ import annotations

from typing import Optional

from .config import GasConfig, get_config
from .errors import InvalidDigit, Overflow
from .logging import get_logger
from .types.gas import MAX_DECIMAL_DIGITS, U64_MAX, Gas

log = get_logger(__name__)

_DIGITS = frozenset("0123456789")


def _first_non_digit(text: str, separators: str) -> Optional[int]:
    for i, ch in enumerate(text):
        if ch not in _DIGITS and ch not in separators:
            return i
    return None


def parse_freeform(text: str, *, config: Optional[GasConfig] = None) -> Gas:
    """
    Parse a free-form gas numeral.

    Args:
        text:   e.g. "300", "1_000_000_000_000"
        config: optional GasConfig; defaults to `get_config()`

    Raises:
        TypeError:    `text` is not a str
        InvalidDigit: empty input, leading non-digit, or embedded non-digit
        Overflow:     the numeral exceeds the u64 range
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    cfg = config or get_config()
    seps = cfg.parse.separators

    if not text or text[0] not in _DIGITS:
        log.debug("rejected gas numeral: leading non-digit", extra={"input": text[:32]})
        raise InvalidDigit(
            "gas numeral must start with a decimal digit",
            char=text[0] if text else None,
            position=0,
        )

    pos = _first_non_digit(text, seps)
    if pos is not None:
        log.debug("rejected gas numeral: embedded non-digit", extra={"input": text[:32], "position": pos})
        raise InvalidDigit(
            f"invalid digit {text[pos]!r} at position {pos}",
            char=text[pos],
            position=pos,
        )

    digits = text.translate({ord(ch): None for ch in seps})
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_DECIMAL_DIGITS or int(significant) > U64_MAX:
        log.debug("rejected gas numeral: overflow", extra={"digits": len(digits)})
        raise Overflow("gas numeral too large to fit in u64", data={"input": text})
    return Gas(int(significant))


__all__ = ["parse_freeform"]
