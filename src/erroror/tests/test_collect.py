"""Tests for collection operations and success markers."""

from __future__ import annotations

import asyncio

import pytest

from erroror.errors import Error
from erroror.monads import (
    Created,
    Deleted,
    ErrorOr,
    Result,
    Success,
    Updated,
    collect,
    lift,
    partition,
    sequence,
    sequence_async,
    traverse,
)


# ═════════════════════════════════════════════════════════════════════════════
# Fail Fast
# ═════════════════════════════════════════════════════════════════════════════


def test_sequence_all_ok() -> None:
    assert sequence([lift(1), lift(2), lift(3)]).value() == [1, 2, 3]


def test_sequence_returns_first_failure_unmerged() -> None:
    first = [Error.conflict("A"), Error.conflict("B")]
    result = sequence([lift(1), ErrorOr.from_errors(first), lift(Error.validation("C"))])

    assert result.errors() == first


def test_sequence_empty() -> None:
    assert sequence([]).value() == []


def test_traverse_stops_calling_after_failure(parse_int) -> None:
    calls: list[str] = []

    def tracked(s: str) -> ErrorOr[int]:
        calls.append(s)
        return parse_int(s)

    result = traverse(["1", "bad", "3"], tracked)

    assert result.first_error().code == "Parse.NotInt"
    assert calls == ["1", "bad"]


def test_traverse_lifts_plain_results() -> None:
    assert traverse([1, 2], lambda x: x * 10).value() == [10, 20]


# ═════════════════════════════════════════════════════════════════════════════
# Accumulate
# ═════════════════════════════════════════════════════════════════════════════


def test_collect_accumulates_in_input_order() -> None:
    result = collect([
        lift(Error.validation("A")),
        lift(1),
        lift([Error.validation("B"), Error.validation("C")]),
    ])

    assert [e.code for e in result.errors()] == ["A", "B", "C"]


def test_collect_all_ok() -> None:
    assert collect([lift("a"), lift("b")]).value() == ["a", "b"]


def test_partition() -> None:
    values, errors = partition([lift(1), lift(Error.failure()), lift(2)])

    assert values == [1, 2]
    assert errors == [Error.failure()]


# ═════════════════════════════════════════════════════════════════════════════
# Async
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_sequence_async_in_order_and_fail_fast() -> None:
    ran: list[int] = []

    async def item(n: int, fail: bool = False) -> ErrorOr[int]:
        ran.append(n)
        await asyncio.sleep(0)
        return lift(Error.conflict(f"Item.{n}")) if fail else lift(n)

    ok = await sequence_async([item(1), item(2)])
    assert ok.value() == [1, 2]

    ran.clear()
    failed = await sequence_async([item(1), item(2, fail=True), item(3)])
    assert failed.first_error().code == "Item.2"
    assert ran == [1, 2]


# ═════════════════════════════════════════════════════════════════════════════
# Markers
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("marker", [Success, Created, Deleted, Updated])
def test_marker_instances_are_equal(marker: type) -> None:
    assert marker() == marker()
    assert hash(marker()) == hash(marker())
    assert str(marker()) == marker.__name__


def test_markers_differ_from_each_other() -> None:
    assert Success() != Created()
    assert Deleted() != Updated()
    assert len({Success(), Created(), Deleted(), Updated()}) == 4


def test_result_namespace() -> None:
    assert Result.success == Success()
    assert Result.created == Created()
    assert Result.deleted == Deleted()
    assert Result.updated == Updated()
    assert lift(Result.deleted).value() == Deleted()
