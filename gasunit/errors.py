"""
gasunit.errors — typed exceptions raised by the Gas value type and its codecs.

Every failure surfaces synchronously as one of these classes. Each carries a stable
machine `code`, a human `message` and optional JSON-safe `data`, so callers can
forward failures over RPC or into receipts without inspecting message text.

Hierarchy
---------
GasError (base)
 ├─ InvalidDigit        : non-digit character in free-form or wire text   (ValueError)
 ├─ Overflow            : result or parsed numeral exceeds 2**64 - 1      (OverflowError)
 ├─ Underflow           : result would be negative                        (ArithmeticError)
 ├─ DivisionByZero      : divide / remainder by zero                      (ZeroDivisionError)
 └─ DecodeError         : malformed or truncated binary payload           (ValueError)
     └─ DescriptorMismatch : structural descriptor incompatible with this build

Each concrete class also derives from the closest builtin so code that already
catches `ValueError`, `OverflowError` or `ZeroDivisionError` keeps working.

This module imports nothing from the rest of the package so it can be used from
every layer without cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class GasError(Exception):
    """
    Base gas error.

    Attributes:
        message: Human-readable explanation.
        code:    Stable machine code string (e.g. 'GAS/OVERFLOW').
        data:    Optional structured details (kept JSON-serializable).
    """
    message: str = "gas error"
    code: str = "GAS/ERROR"
    data: Optional[Dict[str, Any]] = field(default=None)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.data:
            return f"{self.code}: {self.message} ({self.data})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-safe dict for logs and RPC errors."""
        out: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            out["data"] = self.data
        return out


class InvalidDigit(GasError, ValueError):
    """
    Leading or embedded non-digit character.

    Raised by the free-form parser and by the wire-text decoder. `data` carries the
    offending `char` and its `position` when known.
    """
    def __init__(
        self,
        message: str = "invalid digit found in string",
        *,
        char: Optional[str] = None,
        position: Optional[int] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        d: Dict[str, Any] = {}
        if data:
            d.update(data)
        if char is not None:
            d.setdefault("char", char)
        if position is not None:
            d.setdefault("position", position)
        super().__init__(message=message, code="GAS/INVALID_DIGIT", data=d or None)


class Overflow(GasError, OverflowError):
    """Arithmetic result or parsed numeral exceeds the u64 range."""
    def __init__(self, message: str = "number too large to fit in u64", *, data: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="GAS/OVERFLOW", data=data)


class Underflow(GasError, ArithmeticError):
    """Subtraction result (or constructor input) would be negative."""
    def __init__(self, message: str = "gas underflow", *, data: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="GAS/UNDERFLOW", data=data)


class DivisionByZero(GasError, ZeroDivisionError):
    """Division or remainder by a zero scalar."""
    def __init__(self, message: str = "division by zero", *, data: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="GAS/DIVISION_BY_ZERO", data=data)


class DecodeError(GasError, ValueError):
    """
    Malformed or truncated binary payload.

    Typical triggers:
      - fewer than 8 bytes where a Gas value is expected
      - trailing bytes after the value (strict mode)
      - an envelope that is not valid CBOR or lacks required keys
    """
    def __init__(
        self,
        message: str = "malformed gas payload",
        *,
        code: str = "GAS/DECODE",
        data: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, data=data)


class DescriptorMismatch(DecodeError):
    """
    A structural descriptor (or its fingerprint) does not match this build.

    Raised when a consumer presents a descriptor with a different declaration,
    layout, or a newer version than the one this library understands.
    """
    def __init__(
        self,
        message: str = "structural descriptor mismatch",
        *,
        expected: Optional[str] = None,
        got: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        d: Dict[str, Any] = {}
        if data:
            d.update(data)
        if expected is not None:
            d.setdefault("expected", expected)
        if got is not None:
            d.setdefault("got", got)
        super().__init__(message=message, code="GAS/DESCRIPTOR_MISMATCH", data=d or None)


# -------- helper utilities ---------------------------------------------------


def error_to_dict(err: BaseException) -> Dict[str, Any]:
    """
    Map any exception to a `{code, message, data?}` payload.

    GasError subclasses keep their own code; anything else is reported as
    'GAS/INTERNAL' with the exception type recorded in `data`.
    """
    if isinstance(err, GasError):
        return err.to_dict()
    return {
        "code": "GAS/INTERNAL",
        "message": str(err) or type(err).__name__,
        "data": {"type": type(err).__name__},
    }


__all__ = [
    "GasError",
    "InvalidDigit",
    "Overflow",
    "Underflow",
    "DivisionByZero",
    "DecodeError",
    "DescriptorMismatch",
    "error_to_dict",
]
