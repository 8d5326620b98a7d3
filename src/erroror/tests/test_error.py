"""Tests for the Error value and its factories."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from erroror.errors import NO_ERRORS, NO_FIRST_ERROR, Error, ErrorType
from erroror.monads import lift


# ═════════════════════════════════════════════════════════════════════════════
# Factories
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("factory", "kind", "code", "description"),
    [
        (Error.failure, ErrorType.FAILURE, "General.Failure", "A failure has occurred."),
        (Error.unexpected, ErrorType.UNEXPECTED, "General.Unexpected", "An unexpected error has occurred."),
        (Error.validation, ErrorType.VALIDATION, "General.Validation", "A validation error has occurred."),
        (Error.conflict, ErrorType.CONFLICT, "General.Conflict", "A conflict error has occurred."),
        (Error.not_found, ErrorType.NOT_FOUND, "General.NotFound", "A 'Not Found' error has occurred."),
        (Error.unauthorized, ErrorType.UNAUTHORIZED, "General.Unauthorized", "An 'Unauthorized' error has occurred."),
    ],
)
def test_factory_defaults(factory, kind: ErrorType, code: str, description: str) -> None:
    error = factory()

    assert error.code == code
    assert error.description == description
    assert error.type is kind
    assert error.numeric_type == kind.value
    assert error.metadata is None


def test_factory_with_arguments() -> None:
    error = Error.validation("User.Name", "Name is required.", metadata={"field": "name", "min": 1})

    assert error.code == "User.Name"
    assert error.description == "Name is required."
    assert error.type is ErrorType.VALIDATION
    assert error.metadata == {"field": "name", "min": 1}


def test_custom_keeps_unnamed_integer() -> None:
    """Integers outside the enumeration are valid and kept verbatim."""
    error = Error.custom(42, "Billing.Declined", "Card declined.")

    assert error.numeric_type == 42
    assert error.type == 42
    assert not isinstance(error.type, ErrorType)


def test_custom_with_builtin_value_resolves_member() -> None:
    error = Error.custom(ErrorType.CONFLICT, "Order.Duplicate", "Order already exists.")

    assert error.type is ErrorType.CONFLICT
    assert error.numeric_type == 3


def test_custom_accepts_negative_integer() -> None:
    assert Error.custom(-7, "X", "y").numeric_type == -7


# ═════════════════════════════════════════════════════════════════════════════
# Value Semantics
# ═════════════════════════════════════════════════════════════════════════════


def test_structural_equality() -> None:
    a = Error.conflict("Order.Duplicate", "dup", metadata={"ids": [1, 2], "nested": {"x": True}})
    b = Error.conflict("Order.Duplicate", "dup", metadata={"ids": [1, 2], "nested": {"x": True}})

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


@pytest.mark.parametrize(
    "other",
    [
        Error.conflict("Other", "dup"),
        Error.conflict("Order.Duplicate", "other"),
        Error.validation("Order.Duplicate", "dup"),
        Error.conflict("Order.Duplicate", "dup", metadata={"k": "v"}),
    ],
)
def test_inequality_on_any_field(other: Error) -> None:
    assert Error.conflict("Order.Duplicate", "dup") != other


def test_frozen() -> None:
    error = Error.failure()

    with pytest.raises(ValidationError):
        error.code = "Changed"  # type: ignore[misc]


@pytest.mark.parametrize(
    "metadata",
    [
        {"handle": object()},
        {"ids": {1, 2}},
        {"ids": [{1, 2}]},
        {"nested": {"handle": object()}},
        {"nested": [{"deeper": [object()]}]},
        {"nested": {1: "non-str key"}},
    ],
)
def test_metadata_rejects_values_outside_json_set(metadata: dict) -> None:
    with pytest.raises(ValidationError):
        Error.failure(metadata=metadata)


def test_metadata_is_read_only() -> None:
    error = Error.validation(metadata={"field": "name", "tags": ["a"], "nested": {"x": 1}})
    before = hash(error)

    with pytest.raises(TypeError):
        error.metadata["field"] = "email"  # type: ignore[index]
    with pytest.raises(TypeError):
        error.metadata["nested"]["x"] = 2  # type: ignore[index]
    with pytest.raises(AttributeError):
        error.metadata["tags"].append("b")  # type: ignore[union-attr]

    assert error.metadata == {"field": "name", "tags": ("a",), "nested": {"x": 1}}
    assert hash(error) == before


def test_metadata_is_not_shared_with_caller() -> None:
    source = {"ids": [1, 2]}
    error = Error.conflict(metadata=source)
    source["ids"].append(3)

    assert error.metadata["ids"] == (1, 2)


def test_nested_metadata_keeps_error_hashable() -> None:
    error = Error.failure(metadata={"ids": [1, [2, 3]], "h": {"x": [True, None]}})

    assert len({error, lift(error).first_error()}) == 1
    assert hash(lift(error)) == hash(lift(error))


def test_dump_and_repr_show_plain_metadata() -> None:
    error = Error.failure(metadata={"ids": [1, 2], "h": {"x": 1}})

    assert error.model_dump()["metadata"] == {"ids": [1, 2], "h": {"x": 1}}
    assert "mappingproxy" not in repr(error)
    assert "metadata={'ids': [1, 2]" in error.format()


def test_with_metadata_returns_new_error() -> None:
    base = Error.not_found("User.Missing", "No such user.", metadata={"user_id": 7})
    enriched = base.with_metadata(tenant="acme")

    assert enriched.metadata == {"user_id": 7, "tenant": "acme"}
    assert base.metadata == {"user_id": 7}
    assert enriched.code == base.code


def test_format_names_every_field() -> None:
    text = str(Error.custom(42, "Billing.Declined", "Card declined.", metadata={"card": "visa"}))

    for name in ("code=", "description=", "type=42", "numeric_type=42", "metadata="):
        assert name in text
    assert "type=VALIDATION" in Error.validation().format()


# ═════════════════════════════════════════════════════════════════════════════
# Sentinels
# ═════════════════════════════════════════════════════════════════════════════


def test_sentinels_are_fixed_unexpected_errors() -> None:
    assert NO_FIRST_ERROR.code == "ErrorOr.NoFirstError"
    assert NO_ERRORS.code == "ErrorOr.NoErrors"
    assert NO_FIRST_ERROR.type is ErrorType.UNEXPECTED
    assert NO_ERRORS.type is ErrorType.UNEXPECTED
    assert NO_FIRST_ERROR != NO_ERRORS
