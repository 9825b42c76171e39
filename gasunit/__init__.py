"""
gasunit — an unsigned 64-bit gas quantity for metered execution runtimes.

Costs, budgets and prices are carried as `Gas` values with checked arithmetic,
a compact 8-byte binary form, a quoted-decimal wire form, and a free-form parser
for human-written numerals such as "300_000_000_000_000".

    from gasunit import Gas, parse_freeform
    from gasunit.encoding import binary, text

    budget = Gas.from_tgas(300)
    budget.sub_in_place(parse_freeform("5_000_000_000_000"))
    text.to_wire(budget)        # '"295000000000000"'
    binary.encode(budget)       # 8 bytes, little-endian

Heavier integrations (pydantic) live in `gasunit.adapters` and are imported
explicitly.
"""

from .errors import (
    DecodeError,
    DescriptorMismatch,
    DivisionByZero,
    GasError,
    InvalidDigit,
    Overflow,
    Underflow,
)
from .parse import parse_freeform
from .types.gas import MAX_DECIMAL_DIGITS, ONE_TGAS, TGAS_UNITS, U64_MAX, Gas
from .version import __version__

__all__ = [
    "__version__",
    "Gas",
    "ONE_TGAS",
    "TGAS_UNITS",
    "U64_MAX",
    "MAX_DECIMAL_DIGITS",
    "parse_freeform",
    "GasError",
    "InvalidDigit",
    "Overflow",
    "Underflow",
    "DivisionByZero",
    "DecodeError",
    "DescriptorMismatch",
]
