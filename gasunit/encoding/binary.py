"""
gasunit.encoding.binary — fixed-width binary form of Gas.

Layout
------
    Gas := u64 magnitude, 8 bytes, little-endian, unsigned

The layout is published as a *structural descriptor* (a small JSON-able dict) so
consumers that persist or exchange the bytes can confirm, across schema versions,
that both sides agree on its shape before trusting a payload:

    {
      "version": 1,
      "declaration": "Gas",
      "definitions": {"Gas": {"kind": "struct",
                              "fields": [{"name": "magnitude", "type": "u64"}]}},
      "layout": {"width": 8, "endianness": "little", "signed": false}
    }

`descriptor_fingerprint()` is the SHA3-256 of the canonical JSON of that dict and
is what the CBOR envelope (`gasunit.encoding.envelope`) carries on the wire.
"""

from __future__ import annotations

import copy
import hashlib
import json
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from jsonschema import ValidationError

from ..config import GasConfig, get_config
from ..errors import DecodeError, DescriptorMismatch
from ..logging import get_logger
from ..schemas import validate_descriptor_shape
from ..types.gas import Gas

log = get_logger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

GAS_BYTES = 8
DESCRIPTOR_VERSION = 1

_DESCRIPTOR: Dict[str, Any] = {
    "version": DESCRIPTOR_VERSION,
    "declaration": "Gas",
    "definitions": {
        "Gas": {
            "kind": "struct",
            "fields": [{"name": "magnitude", "type": "u64"}],
        },
    },
    "layout": {"width": GAS_BYTES, "endianness": "little", "signed": False},
}


def _canonical_json(obj: Any) -> bytes:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


# -------------------------------
# Descriptor
# -------------------------------


def descriptor() -> Dict[str, Any]:
    """Return a fresh copy of the structural descriptor for the Gas layout."""
    return copy.deepcopy(_DESCRIPTOR)


def descriptor_fingerprint(desc: Optional[Mapping[str, Any]] = None) -> str:
    """0x-prefixed SHA3-256 of the canonical JSON of `desc` (default: ours)."""
    return "0x" + hashlib.sha3_256(_canonical_json(desc if desc is not None else _DESCRIPTOR)).hexdigest()


def validate_descriptor(desc: Mapping[str, Any]) -> None:
    """
    Check that a descriptor presented by another party is compatible with ours.

    The descriptor must satisfy the packaged JSON Schema, must not come from a
    newer version, and must describe the same declaration and byte layout.

    Raises:
        DescriptorMismatch
    """
    try:
        validate_descriptor_shape(desc)
    except ValidationError as e:
        raise DescriptorMismatch(f"descriptor is malformed: {e.message}") from e

    if desc["version"] > DESCRIPTOR_VERSION:
        raise DescriptorMismatch(
            "descriptor version is newer than supported",
            expected=str(DESCRIPTOR_VERSION),
            got=str(desc["version"]),
        )

    name = desc["declaration"]
    if name != _DESCRIPTOR["declaration"]:
        raise DescriptorMismatch("descriptor declares a different type", expected="Gas", got=name)

    ours = _DESCRIPTOR["definitions"]["Gas"]
    theirs = desc["definitions"].get(name)
    if theirs != ours:
        raise DescriptorMismatch(
            "descriptor field layout differs",
            expected=_canonical_json(ours).decode("utf-8"),
            got=_canonical_json(theirs).decode("utf-8") if theirs is not None else None,
        )

    if desc["layout"] != _DESCRIPTOR["layout"]:
        raise DescriptorMismatch(
            "descriptor byte layout differs",
            expected=_canonical_json(_DESCRIPTOR["layout"]).decode("utf-8"),
            got=_canonical_json(desc["layout"]).decode("utf-8"),
        )


# -------------------------------
# Encode / decode
# -------------------------------


def encode(gas: Gas) -> bytes:
    """8-byte little-endian encoding of `gas.magnitude`."""
    if not isinstance(gas, Gas):
        raise TypeError(f"expected Gas, got {type(gas).__name__}")
    return gas.magnitude.to_bytes(GAS_BYTES, "little", signed=False)


def _as_bytes(data: Any) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DecodeError(
            f"expected bytes-like payload, got {type(data).__name__}",
            data={"type": type(data).__name__},
        )
    return bytes(data)


def decode_from(data: BytesLike, offset: int = 0) -> Tuple[Gas, int]:
    """
    Read one Gas value at `offset` inside a larger payload.

    Returns:
        (gas, offset just past the 8 bytes consumed)

    Raises:
        DecodeError: fewer than 8 bytes available at `offset`
    """
    buf = _as_bytes(data)
    if offset < 0:
        raise DecodeError("offset must be non-negative", data={"offset": offset})
    end = offset + GAS_BYTES
    if len(buf) < end:
        log.debug("rejected gas payload: truncated", extra={"have": len(buf) - offset, "need": GAS_BYTES})
        raise DecodeError(
            f"unexpected end of payload: need {GAS_BYTES} bytes, have {max(len(buf) - offset, 0)}",
            data={"offset": offset, "length": len(buf)},
        )
    return Gas(int.from_bytes(buf[offset:end], "little", signed=False)), end


def decode(data: BytesLike, *, config: Optional[GasConfig] = None) -> Gas:
    """
    Decode exactly one Gas value.

    Raises:
        DecodeError: shorter than 8 bytes, or (when `reject_trailing_bytes` is on)
                     longer than 8 bytes
    """
    cfg = config or get_config()
    gas, end = decode_from(data)
    extra = len(_as_bytes(data)) - end
    if extra and cfg.codec.reject_trailing_bytes:
        log.debug("rejected gas payload: trailing bytes", extra={"trailing": extra})
        raise DecodeError(
            f"not all bytes consumed: {extra} trailing byte(s) after gas value",
            data={"trailing": extra},
        )
    return gas


__all__ = [
    "GAS_BYTES",
    "DESCRIPTOR_VERSION",
    "descriptor",
    "descriptor_fingerprint",
    "validate_descriptor",
    "encode",
    "decode",
    "decode_from",
]
