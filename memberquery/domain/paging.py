from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from math import ceil
from typing import Generic, TypeVar

from memberquery.application.errors import ValidationError
from memberquery.domain.predicates import Attribute

T = TypeVar("T")


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


@dataclass(frozen=True)
class SortOrder:
    attribute: Attribute
    direction: SortDirection = SortDirection.asc

    @classmethod
    def parse(cls, raw: str) -> "SortOrder":
        """Parse ``attribute[,direction]``, e.g. ``username,desc``."""
        attribute_name, _, direction_name = raw.partition(",")
        try:
            attribute = Attribute(attribute_name.strip())
        except ValueError as exc:
            raise ValidationError(f"Unsupported sort attribute: {attribute_name.strip()!r}") from exc
        direction_name = direction_name.strip().lower() or SortDirection.asc.value
        try:
            direction = SortDirection(direction_name)
        except ValueError as exc:
            raise ValidationError(f"Unsupported sort direction: {direction_name!r}") from exc
        return cls(attribute=attribute, direction=direction)


@dataclass(frozen=True)
class PageRequest:
    offset: int = 0
    limit: int = 20
    sort: tuple[SortOrder, ...] = ()

    @classmethod
    def of_page(cls, page: int, size: int, sort: Sequence[SortOrder] = ()) -> "PageRequest":
        return cls(offset=page * size, limit=size, sort=tuple(sort))


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    total: int
    offset: int
    limit: int
    count_query_executed: bool = field(default=False, compare=False)

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.limit) if self.total > 0 else 0

    @property
    def current_page(self) -> int:
        return (self.offset // self.limit) + 1 if self.total > 0 else 0

    @property
    def has_next(self) -> bool:
        return (self.offset + self.limit) < self.total

    @property
    def has_prev(self) -> bool:
        return self.offset > 0
