"""
gasunit.config — programmatic configuration for parsing and decoding Gas values.

This module centralizes the few knobs the codecs expose:
  • Free-form parsing: which characters count as digit-group separators
  • Binary decoding: whether bytes after the 8-byte value are an error
  • Text decoding: whether leading zeros are accepted on input

Nothing here reads the environment or the filesystem; embedders build a config
explicitly and pass it to the codecs, or rely on the cached defaults.

Programmatic usage:
    from gasunit.config import load_config
    cfg = load_config(overrides={"separators": "_,"})
    parse_freeform("1,000,000", config=cfg)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from functools import lru_cache
from typing import Dict, Mapping, Optional, Union

# ----------------------------- helpers -------------------------------------


_BOOL_TRUE = {"1", "true", "t", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "f", "no", "n", "off"}

# Characters that can never act as separators: they carry meaning in the numeral
# itself or in the quoted wire form.
_FORBIDDEN_SEPARATORS = set("0123456789\"")


def _bool_opt(value: Union[str, bool, int, None], default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    v = value.strip().lower()
    if v in _BOOL_TRUE:
        return True
    if v in _BOOL_FALSE:
        return False
    raise ValueError(f"invalid boolean option: {value!r}")


# ------------------------------ dataclasses ---------------------------------


@dataclass(frozen=True)
class ParseOptions:
    separators: str = "_"


@dataclass(frozen=True)
class CodecOptions:
    reject_trailing_bytes: bool = True
    allow_leading_zeros: bool = True


@dataclass(frozen=True)
class GasConfig:
    parse: ParseOptions = field(default_factory=ParseOptions)
    codec: CodecOptions = field(default_factory=CodecOptions)

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


# ------------------------------ loader --------------------------------------


def _validate_separators(seps: str) -> str:
    if not isinstance(seps, str):
        raise TypeError(f"separators must be a str, got {type(seps).__name__}")
    for ch in seps:
        if ch in _FORBIDDEN_SEPARATORS or ch.isspace() or not ch.isascii():
            raise ValueError(f"invalid separator character: {ch!r}")
    # Keep order stable but drop duplicates.
    return "".join(dict.fromkeys(seps))


def load_config(
    overrides: Optional[Mapping[str, Union[str, bool, int]]] = None,
) -> GasConfig:
    """
    Build a GasConfig from defaults and optional overrides.

    Args:
        overrides: explicit field overrides; keys supported:
          'separators', 'reject_trailing_bytes', 'allow_leading_zeros'

    Raises:
        KeyError:   unknown override key
        ValueError: invalid separator characters or boolean spelling
    """
    overrides = dict(overrides or {})
    unknown = set(overrides) - {"separators", "reject_trailing_bytes", "allow_leading_zeros"}
    if unknown:
        raise KeyError(f"unknown config option(s): {', '.join(sorted(unknown))}")

    parse = ParseOptions(
        separators=_validate_separators(overrides.get("separators", ParseOptions.separators)),
    )
    codec = CodecOptions(
        reject_trailing_bytes=_bool_opt(
            overrides.get("reject_trailing_bytes"), CodecOptions.reject_trailing_bytes
        ),
        allow_leading_zeros=_bool_opt(
            overrides.get("allow_leading_zeros"), CodecOptions.allow_leading_zeros
        ),
    )
    return GasConfig(parse=parse, codec=codec)


@lru_cache(maxsize=1)
def get_config() -> GasConfig:
    """
    Cached default config, used whenever a codec is called without `config=`.
    """
    return load_config()


def summary(cfg: Optional[GasConfig] = None) -> str:
    """
    Return a one-line summary of the active knobs.
    """
    cfg = cfg or get_config()
    return (
        "gas{"
        f"separators={cfg.parse.separators!r}, "
        f"strict_bytes={int(cfg.codec.reject_trailing_bytes)}, "
        f"leading_zeros={int(cfg.codec.allow_leading_zeros)}"
        "}"
    )


__all__ = [
    "ParseOptions",
    "CodecOptions",
    "GasConfig",
    "load_config",
    "get_config",
    "summary",
]
