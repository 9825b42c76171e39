"""
gasunit.types — the Gas value type and its constants.

Public surface (re-exported):
    Gas                      : u64-backed gas quantity with checked arithmetic
    U64_MAX, TGAS_UNITS      : range and scaling constants
    MAX_DECIMAL_DIGITS       : longest canonical decimal rendering (20)
    ONE_TGAS                 : Gas(10**12)
"""

from __future__ import annotations

from .gas import MAX_DECIMAL_DIGITS, ONE_TGAS, TGAS_UNITS, U64_MAX, Gas

__all__ = [
    "Gas",
    "U64_MAX",
    "TGAS_UNITS",
    "MAX_DECIMAL_DIGITS",
    "ONE_TGAS",
]
