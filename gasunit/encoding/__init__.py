"""
gasunit.encoding — external representations of Gas.

    text      : quoted decimal string for JSON and other interchange formats
    binary    : 8-byte little-endian form plus structural descriptor
    envelope  : versioned CBOR wrapper around the binary form
"""

from __future__ import annotations

from . import binary, envelope, text

__all__ = ["binary", "envelope", "text"]
