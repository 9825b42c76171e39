"""
gasunit.encoding.envelope — versioned CBOR envelope around the binary form.

For persistence and cross-process payloads the raw 8 bytes are wrapped together
with the descriptor fingerprint, so a reader built against a different layout
fails loudly instead of misreading the value:

    {
      "v":      1,                     # envelope version
      "schema": h'<32-byte sha3-256>', # binary.descriptor_fingerprint()
      "gas":    h'<8 bytes LE>'        # binary.encode(gas)
    }

Encoding uses cbor2 in canonical mode so equal values produce identical bytes.
"""

from __future__ import annotations

from typing import Any, Optional

import cbor2

from ..config import GasConfig
from ..errors import DecodeError, DescriptorMismatch
from ..logging import get_logger
from ..types.gas import Gas
from . import binary

log = get_logger(__name__)

ENVELOPE_VERSION = 1

_REQUIRED_KEYS = ("v", "schema", "gas")


def _fingerprint_bytes() -> bytes:
    return bytes.fromhex(binary.descriptor_fingerprint()[2:])


def pack(gas: Gas) -> bytes:
    """Encode `gas` as a canonical CBOR envelope."""
    return cbor2.dumps(
        {"v": ENVELOPE_VERSION, "schema": _fingerprint_bytes(), "gas": binary.encode(gas)},
        canonical=True,
    )


def unpack(data: bytes, *, config: Optional[GasConfig] = None) -> Gas:
    """
    Decode an envelope produced by `pack`.

    Raises:
        DecodeError:        not CBOR, not a map, missing keys, unknown version,
                            or an invalid inner payload
        DescriptorMismatch: the embedded fingerprint is not ours
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DecodeError(f"expected bytes-like envelope, got {type(data).__name__}")
    try:
        obj: Any = cbor2.loads(bytes(data))
    except (cbor2.CBORDecodeError, ValueError) as e:
        log.debug("rejected gas envelope: invalid CBOR", extra={"length": len(data)})
        raise DecodeError(f"gas envelope is not valid CBOR: {e}") from e

    if not isinstance(obj, dict):
        raise DecodeError(f"gas envelope must be a CBOR map, got {type(obj).__name__}")
    missing = [k for k in _REQUIRED_KEYS if k not in obj]
    if missing:
        raise DecodeError(f"gas envelope missing key(s): {', '.join(missing)}", data={"missing": missing})

    version = obj["v"]
    if isinstance(version, bool) or not isinstance(version, int) or version != ENVELOPE_VERSION:
        raise DecodeError(
            f"unsupported gas envelope version: {version!r}",
            data={"supported": ENVELOPE_VERSION},
        )

    schema = obj["schema"]
    expected = _fingerprint_bytes()
    if not isinstance(schema, bytes) or schema != expected:
        got = "0x" + schema.hex() if isinstance(schema, bytes) else repr(schema)
        log.debug("rejected gas envelope: descriptor mismatch", extra={"got": got})
        raise DescriptorMismatch(
            "gas envelope was written for a different binary layout",
            expected="0x" + expected.hex(),
            got=got,
        )

    payload = obj["gas"]
    if not isinstance(payload, bytes):
        raise DecodeError(f"gas envelope payload must be bytes, got {type(payload).__name__}")
    return binary.decode(payload, config=config)


__all__ = ["ENVELOPE_VERSION", "pack", "unpack"]
