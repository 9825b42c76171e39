"""
gasunit schemas package.

Ships the JSON Schema for the Gas binary structural descriptor:

- gas_descriptor.schema.json : shape of the dict returned by
  `gasunit.encoding.binary.descriptor()`

Works whether the package is installed from a wheel or run from a checkout.

Example:

    from gasunit.schemas import load_descriptor_schema, iter_descriptor_errors

    schema = load_descriptor_schema()
    problems = list(iter_descriptor_errors({"version": 1}))
"""

from __future__ import annotations

import hashlib
import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema.exceptions import best_match

_DESCRIPTOR_SCHEMA = "gas_descriptor.schema.json"


def _read_bytes(filename: str) -> bytes:
    return resources.files(__package__).joinpath(filename).read_bytes()


@lru_cache(maxsize=1)
def _descriptor_validator() -> jsonschema.Draft202012Validator:
    schema = load_descriptor_schema()
    jsonschema.Draft202012Validator.check_schema(schema)
    return jsonschema.Draft202012Validator(schema)


def load_descriptor_schema() -> Dict[str, Any]:
    """Return the parsed JSON object from `gas_descriptor.schema.json`."""
    return json.loads(_read_bytes(_DESCRIPTOR_SCHEMA).decode("utf-8"))


def schema_checksum() -> str:
    """SHA3-256 checksum (0x-prefixed hex) of the descriptor schema resource."""
    return "0x" + hashlib.sha3_256(_read_bytes(_DESCRIPTOR_SCHEMA)).hexdigest()


def iter_descriptor_errors(instance: Any) -> Iterator[str]:
    """Yield human-readable validation messages for a descriptor candidate."""
    for err in sorted(_descriptor_validator().iter_errors(instance), key=lambda e: [str(p) for p in e.path]):
        where = "/".join(str(p) for p in err.path) or "<root>"
        yield f"{where}: {err.message}"


def validate_descriptor_shape(instance: Any) -> None:
    """
    Validate a descriptor candidate against the packaged schema.

    Raises:
        jsonschema.ValidationError on the first (best-match) failure.
    """
    error = best_match(_descriptor_validator().iter_errors(instance))
    if error is not None:
        raise error


__all__ = [
    "load_descriptor_schema",
    "schema_checksum",
    "iter_descriptor_errors",
    "validate_descriptor_shape",
]
