"""
gasunit.adapters.pydantic — Gas as a pydantic v2 field.

`GasField` validates from the wire form (quoted decimal string) and serializes
back to it in JSON mode, so RPC/REST models never expose gas as a JSON number:

    from pydantic import BaseModel
    from gasunit.adapters.pydantic import GasField

    class CallView(BaseModel):
        gas_limit: GasField
        gas_used: GasField

    CallView.model_validate_json('{"gas_limit": "300000000000000", "gas_used": "0"}')

In python mode plain non-negative ints are also accepted for convenience;
JSON input must be a string.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, ValidationInfo, WithJsonSchema

from ..encoding.text import from_text, to_text
from ..errors import GasError
from ..types.gas import Gas


def _validate_gas(value: Any, info: ValidationInfo) -> Gas:
    if isinstance(value, Gas):
        return Gas(value.magnitude)
    try:
        if isinstance(value, str):
            return from_text(value)
        if info.mode == "python" and isinstance(value, int) and not isinstance(value, bool):
            return Gas(value)
    except GasError as e:
        raise ValueError(e.message) from e
    raise ValueError(f"gas must be a decimal string, got {type(value).__name__}")


GAS_JSON_SCHEMA = {
    "type": "string",
    "pattern": "^[0-9]+$",
    "description": "Gas units as an unsigned 64-bit decimal string",
    "examples": ["1000000000000"],
}

GasField = Annotated[
    Gas,
    PlainValidator(_validate_gas),
    PlainSerializer(to_text, return_type=str, when_used="json"),
    WithJsonSchema(GAS_JSON_SCHEMA),
]


__all__ = ["GasField", "GAS_JSON_SCHEMA"]
