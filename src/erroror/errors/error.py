"""Structured error value carried by failed ErrorOr containers.

An Error classifies one failure cause: a stable caller-chosen code, a human
description, an integer classification and optional metadata. Instances are
built through the named factories and never mutated afterwards.

Example:
    >>> err = Error.validation("User.Name", "Name is required.", metadata={"field": "name"})
    >>> err.type
    <ErrorType.VALIDATION: 2>
    >>> Error.custom(42, "Billing.Declined", "Card declined.").type
    42
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, computed_field, field_serializer, field_validator

from .types import (
    ErrorType,
    FrozenMetadata,
    Metadata,
    MetadataValue,
    check_metadata,
    freeze,
    freeze_metadata,
    thaw_metadata,
)


class Error(BaseModel):
    """Immutable classification of a single failure cause.

    `numeric_type` preserves exactly the integer the error was built with;
    `type` reinterprets it as an ErrorType member when one exists.
    """

    model_config = ConfigDict(
        frozen=True, extra="forbid", revalidate_instances="never",
        json_schema_extra={"title": "Error", "examples": [
            {"code": "General.NotFound", "description": "A 'Not Found' error has occurred.", "numeric_type": 4},
        ]},
    )

    code: str
    description: str
    numeric_type: int
    metadata: FrozenMetadata | None = None

    @field_validator("metadata", mode="before")
    @classmethod
    def _check_metadata(cls, v: Any) -> Any:
        if v is not None:
            check_metadata(v)
        return v

    @field_validator("metadata")
    @classmethod
    def _freeze_metadata(cls, v: FrozenMetadata | None) -> FrozenMetadata | None:
        return None if v is None else freeze_metadata(v)

    @field_serializer("metadata")
    def _serialize_metadata(self, v: FrozenMetadata | None) -> Metadata | None:
        return thaw_metadata(v)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type(self) -> ErrorType | int:
        """Named classification, or the raw integer for custom classifications."""
        return ErrorType.resolve(self.numeric_type)

    def __hash__(self) -> int:
        """Hash for frozen model (metadata frozen recursively)."""
        return hash((self.code, self.description, self.numeric_type, freeze(self.metadata)))

    def __repr_args__(self) -> Iterator[tuple[str | None, Any]]:
        for name, value in super().__repr_args__():
            yield name, thaw_metadata(value) if name == "metadata" else value

    # ─────────────────────────────────────────────────────────────────
    # Factories
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def failure(
        cls,
        code: str = "General.Failure",
        description: str = "A failure has occurred.",
        metadata: Metadata | None = None,
    ) -> Error:
        return cls(code=code, description=description, numeric_type=ErrorType.FAILURE.value, metadata=metadata)

    @classmethod
    def unexpected(
        cls,
        code: str = "General.Unexpected",
        description: str = "An unexpected error has occurred.",
        metadata: Metadata | None = None,
    ) -> Error:
        return cls(code=code, description=description, numeric_type=ErrorType.UNEXPECTED.value, metadata=metadata)

    @classmethod
    def validation(
        cls,
        code: str = "General.Validation",
        description: str = "A validation error has occurred.",
        metadata: Metadata | None = None,
    ) -> Error:
        return cls(code=code, description=description, numeric_type=ErrorType.VALIDATION.value, metadata=metadata)

    @classmethod
    def conflict(
        cls,
        code: str = "General.Conflict",
        description: str = "A conflict error has occurred.",
        metadata: Metadata | None = None,
    ) -> Error:
        return cls(code=code, description=description, numeric_type=ErrorType.CONFLICT.value, metadata=metadata)

    @classmethod
    def not_found(
        cls,
        code: str = "General.NotFound",
        description: str = "A 'Not Found' error has occurred.",
        metadata: Metadata | None = None,
    ) -> Error:
        return cls(code=code, description=description, numeric_type=ErrorType.NOT_FOUND.value, metadata=metadata)

    @classmethod
    def unauthorized(
        cls,
        code: str = "General.Unauthorized",
        description: str = "An 'Unauthorized' error has occurred.",
        metadata: Metadata | None = None,
    ) -> Error:
        return cls(code=code, description=description, numeric_type=ErrorType.UNAUTHORIZED.value, metadata=metadata)

    @classmethod
    def custom(
        cls,
        type: int,  # noqa: A002 - mirrors the `type` view on the instance
        code: str,
        description: str,
        metadata: Metadata | None = None,
    ) -> Error:
        """Create an error with any integer classification.

        Lets callers mint their own classification space while keeping the
        same Error shape. Built-in members are accepted as well.
        """
        return cls(code=code, description=description, numeric_type=int(type), metadata=metadata)

    # ─────────────────────────────────────────────────────────────────
    # Derivation & Rendering
    # ─────────────────────────────────────────────────────────────────

    def with_metadata(self, **metadata: MetadataValue) -> Error:
        """Return a copy with `metadata` merged over the existing entries."""
        return type(self)(
            code=self.code,
            description=self.description,
            numeric_type=self.numeric_type,
            metadata={**(self.metadata or {}), **metadata},
        )

    def format(self) -> str:
        """Human-readable rendering naming every field. Not a stable format."""
        kind = self.type.name if isinstance(self.type, ErrorType) else str(self.type)
        return (
            f"Error(code={self.code!r}, description={self.description!r}, type={kind}, "
            f"numeric_type={self.numeric_type}, metadata={thaw_metadata(self.metadata)!r})"
        )

    __str__ = format


# ═══════════════════════════════════════════════════════════════════════════════
# Sentinels
# ═══════════════════════════════════════════════════════════════════════════════

# Returned (never raised) by error accessors on a successful ErrorOr
NO_FIRST_ERROR = Error.unexpected(
    code="ErrorOr.NoFirstError",
    description="First error cannot be retrieved from a successful ErrorOr.",
)

NO_ERRORS = Error.unexpected(
    code="ErrorOr.NoErrors",
    description="Error list cannot be retrieved from a successful ErrorOr.",
)
