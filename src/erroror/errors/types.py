"""Error classification and metadata value types."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Union

# ═══════════════════════════════════════════════════════════════════════════════
# Metadata Values
# ═══════════════════════════════════════════════════════════════════════════════

# Any for recursive slots to avoid Pydantic resolution issues; nested values
# are checked by check_metadata instead
MetadataPrimitive = Union[str, int, float, bool, None]
MetadataValue = Union[MetadataPrimitive, list[Any], dict[str, Any]]
Metadata = dict[str, MetadataValue]
FrozenMetadata = Mapping[str, MetadataValue]


def check_metadata(value: object, path: str = "metadata") -> None:
    """Reject anything outside the JSON-like value set, at any depth."""
    if value is None or isinstance(value, str | int | float | bool):
        return
    if isinstance(value, list | tuple):
        for i, item in enumerate(value):
            check_metadata(item, f"{path}[{i}]")
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValueError(f"{path} keys must be str, got {type(key).__name__}")
            check_metadata(item, f"{path}.{key}")
        return
    raise ValueError(f"{path} holds unsupported value of type {type(value).__name__}")


def freeze_metadata(value: Any) -> Any:
    """Read-only copy: mappings become MappingProxyType, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze_metadata(v) for k, v in value.items()})
    if isinstance(value, list | tuple):
        return tuple(freeze_metadata(v) for v in value)
    return value


def thaw_metadata(value: Any) -> Any:
    """Plain dict/list copy of frozen metadata, for rendering and serialization."""
    if isinstance(value, Mapping):
        return {k: thaw_metadata(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw_metadata(v) for v in value]
    return value


def freeze(value: object) -> object:
    """Convert nested metadata into a hashable equivalent."""
    if isinstance(value, Mapping):
        return frozenset((k, freeze(v)) for k, v in value.items())
    if isinstance(value, list | tuple):
        return tuple(freeze(v) for v in value)
    return value

# ═══════════════════════════════════════════════════════════════════════════════
# Classification
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorType(IntEnum):
    """Built-in error classifications.

    A convenience view over the integer discriminator stored on every Error.
    Custom integers outside this set are valid and simply have no member.
    """
    FAILURE = 0
    UNEXPECTED = 1
    VALIDATION = 2
    CONFLICT = 3
    NOT_FOUND = 4
    UNAUTHORIZED = 5

    @classmethod
    def resolve(cls, numeric: int) -> ErrorType | int:
        """Map an integer to its member, or return it unchanged if unnamed."""
        try:
            return cls(numeric)
        except ValueError:
            return numeric
