"""Zero-data success markers.

For operations whose only outcome worth reporting is that they succeeded:
return ErrorOr[Deleted] instead of an ad hoc boolean. Every instance of a
marker equals every other instance of the same marker.

Example:
    >>> def delete(order_id: int) -> ErrorOr[Deleted]:
    ...     return lift(Result.deleted)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Success:
    def __str__(self) -> str:
        return "Success"


@dataclass(frozen=True, slots=True)
class Created:
    def __str__(self) -> str:
        return "Created"


@dataclass(frozen=True, slots=True)
class Deleted:
    def __str__(self) -> str:
        return "Deleted"


@dataclass(frozen=True, slots=True)
class Updated:
    def __str__(self) -> str:
        return "Updated"


class Result:
    """Shared marker instances."""

    success = Success()
    created = Created()
    deleted = Deleted()
    updated = Updated()
