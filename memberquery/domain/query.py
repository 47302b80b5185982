"""Immutable description of a read over the member/team schema.

Query builders compose ``MemberQuery`` values; a ``QueryExecutor`` adapter
turns them into statements for a concrete storage technology.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Protocol

from memberquery.domain.paging import SortOrder
from memberquery.domain.predicates import Attribute, Predicate, and_all


class Projection(str, Enum):
    member = "member"
    member_id = "member_id"
    member_team = "member_team"
    member_summary = "member_summary"
    username_age = "username_age"

    @property
    def needs_team(self) -> bool:
        return self is Projection.member_team


class JoinKind(str, Enum):
    none = "none"
    inner = "inner"
    left = "left"


@dataclass(frozen=True)
class MemberQuery:
    projection: Projection = Projection.member
    team_join: JoinKind = JoinKind.none
    predicate: Predicate | None = None
    sort: tuple[SortOrder, ...] = ()
    offset: int | None = None
    limit: int | None = None

    def select(self, projection: Projection) -> "MemberQuery":
        return replace(self, projection=projection)

    def join_team(self) -> "MemberQuery":
        return replace(self, team_join=JoinKind.inner)

    def left_join_team(self) -> "MemberQuery":
        return replace(self, team_join=JoinKind.left)

    def where(self, *predicates: Predicate | None) -> "MemberQuery":
        return replace(self, predicate=and_all(self.predicate, *predicates))

    def order_by(self, *orders: SortOrder) -> "MemberQuery":
        return replace(self, sort=self.sort + tuple(orders))

    def paged(self, offset: int, limit: int) -> "MemberQuery":
        return replace(self, offset=offset, limit=limit)

    def for_count(self) -> "MemberQuery":
        return replace(self, sort=(), offset=None, limit=None)

    def referenced_attributes(self) -> frozenset[Attribute]:
        referenced = set(self.predicate.attributes()) if self.predicate is not None else set()
        referenced.update(order.attribute for order in self.sort)
        return frozenset(referenced)


class QueryExecutor(Protocol):
    def fetch(self, query: MemberQuery) -> list[Any]: ...

    def count(self, query: MemberQuery) -> int: ...
