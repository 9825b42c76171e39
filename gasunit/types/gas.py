"""
gasunit.types.gas — the Gas value type and its checked arithmetic.

Gas quantities are unsigned 64-bit integers. Python's ints are unbounded, so the
u64 range is enforced explicitly: every constructor and arithmetic helper checks
its result and raises a typed error instead of wrapping around or going negative.

Exports
-------
* Type: `Gas`
* Constants: `U64_MAX`, `TGAS_UNITS`, `MAX_DECIMAL_DIGITS`, `ONE_TGAS`
* Arithmetic (checked, raise on failure):
    - `add` / `add_in_place`     → Overflow above U64_MAX
    - `sub` / `sub_in_place`     → Underflow below zero
    - `mul_scalar(n)`            → Overflow
    - `div_scalar(n)`, `rem_scalar(n)` → DivisionByZero for n == 0
* Saturating helpers: `saturating_add` (clamps at U64_MAX), `saturating_sub`
  (clamps at zero)

Operators `+ - * // %` delegate to the checked methods, so behaviour is identical
regardless of how a value is combined. `+=` and `-=` produce new values; only the
explicit `*_in_place` methods mutate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..errors import DivisionByZero, Overflow, Underflow

if TYPE_CHECKING:  # pragma: no cover
    from ..config import GasConfig

# ------------------------------- constants -----------------------------------

U64_MAX: int = (1 << 64) - 1
"""Maximum unsigned 64-bit integer."""

TGAS_UNITS: int = 10**12
"""Gas units in one tera-gas."""

MAX_DECIMAL_DIGITS: int = 20
"""Decimal digits in U64_MAX; no valid magnitude renders longer."""


# --------------------------------- utils -------------------------------------


def _ensure_u64(n: int, what: str = "value") -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{what} must be an int, got {type(n).__name__}")
    if n < 0:
        raise Underflow(f"{what} must be non-negative", data={what: n})
    if n > U64_MAX:
        raise Overflow(f"{what} exceeds u64 range", data={what: str(n)})
    return n


def _ensure_gas(other: object) -> "Gas":
    if not isinstance(other, Gas):
        raise TypeError(f"expected Gas, got {type(other).__name__}")
    return other


# --------------------------------- type --------------------------------------


@dataclass(frozen=True, order=True)
class Gas:
    """
    A quantity of gas units backed by an unsigned 64-bit `magnitude`.

    Frozen: `magnitude` cannot be reassigned, and `+=` / `-=` rebind the name to a
    new value. Only the explicit `add_in_place` / `sub_in_place` change a value,
    and they leave it untouched when they fail. Hashing follows `magnitude`, so
    don't mutate a value used as a dict key.
    """

    magnitude: int = 0

    def __post_init__(self) -> None:
        _ensure_u64(self.magnitude, "magnitude")

    def __hash__(self) -> int:
        return hash((Gas, self.magnitude))

    # ----------------------------- constructors ------------------------------

    @classmethod
    def from_raw(cls, units: int) -> "Gas":
        """Wrap raw gas units."""
        return cls(units)

    @classmethod
    def from_tgas(cls, tgas: int) -> "Gas":
        """Return `tgas * 10**12` gas units; Overflow if that leaves the u64 range."""
        return cls(TGAS_UNITS).mul_scalar(tgas)

    @classmethod
    def parse(cls, text: str, *, config: Optional["GasConfig"] = None) -> "Gas":
        """Parse free-form numeral text such as "1_000_000_000_000"."""
        from ..parse import parse_freeform

        return parse_freeform(text, config=config)

    # ------------------------------ arithmetic -------------------------------

    def add(self, other: "Gas") -> "Gas":
        s = self.magnitude + _ensure_gas(other).magnitude
        if s > U64_MAX:
            raise Overflow(
                f"addition overflow: {self.magnitude} + {other.magnitude} > {U64_MAX}",
                data={"lhs": str(self.magnitude), "rhs": str(other.magnitude)},
            )
        return Gas(s)

    def add_in_place(self, other: "Gas") -> "Gas":
        object.__setattr__(self, "magnitude", self.add(other).magnitude)
        return self

    def sub(self, other: "Gas") -> "Gas":
        if _ensure_gas(other).magnitude > self.magnitude:
            raise Underflow(
                f"subtraction underflow: {self.magnitude} - {other.magnitude} < 0",
                data={"lhs": str(self.magnitude), "rhs": str(other.magnitude)},
            )
        return Gas(self.magnitude - other.magnitude)

    def sub_in_place(self, other: "Gas") -> "Gas":
        object.__setattr__(self, "magnitude", self.sub(other).magnitude)
        return self

    def mul_scalar(self, n: int) -> "Gas":
        product = self.magnitude * _ensure_u64(n, "scalar")
        if product > U64_MAX:
            raise Overflow(
                f"multiplication overflow: {self.magnitude} * {n} > {U64_MAX}",
                data={"lhs": str(self.magnitude), "scalar": str(n)},
            )
        return Gas(product)

    def div_scalar(self, n: int) -> "Gas":
        if _ensure_u64(n, "scalar") == 0:
            raise DivisionByZero(f"cannot divide {self.magnitude} gas by zero")
        return Gas(self.magnitude // n)

    def rem_scalar(self, n: int) -> "Gas":
        if _ensure_u64(n, "scalar") == 0:
            raise DivisionByZero(f"cannot take remainder of {self.magnitude} gas by zero")
        return Gas(self.magnitude % n)

    def saturating_add(self, other: "Gas") -> "Gas":
        """Addition clamped at U64_MAX."""
        return Gas(min(self.magnitude + _ensure_gas(other).magnitude, U64_MAX))

    def saturating_sub(self, other: "Gas") -> "Gas":
        """Subtraction clamped at zero."""
        return Gas(max(self.magnitude - _ensure_gas(other).magnitude, 0))

    # ------------------------------ operators --------------------------------

    def __add__(self, other: object) -> "Gas":
        if not isinstance(other, Gas):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "Gas":
        # sum() starts from int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return Gas(self.magnitude)
        return NotImplemented

    def __sub__(self, other: object) -> "Gas":
        if not isinstance(other, Gas):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, n: object) -> "Gas":
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return self.mul_scalar(n)

    __rmul__ = __mul__

    def __floordiv__(self, n: object) -> "Gas":
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return self.div_scalar(n)

    def __mod__(self, n: object) -> "Gas":
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return self.rem_scalar(n)

    # ------------------------------ conversions ------------------------------

    def __int__(self) -> int:
        return self.magnitude

    def __bool__(self) -> bool:
        return self.magnitude != 0

    def __str__(self) -> str:
        return str(self.magnitude)


ONE_TGAS: Gas = Gas(TGAS_UNITS)


__all__ = [
    "Gas",
    "U64_MAX",
    "TGAS_UNITS",
    "MAX_DECIMAL_DIGITS",
    "ONE_TGAS",
]
