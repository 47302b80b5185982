from typing import Any

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import ColumnElement, Select

from memberquery.domain.member_views import MemberTeamView, MemberView
from memberquery.domain.paging import SortDirection
from memberquery.domain.predicates import Attribute, Comparison, Operator, Predicate
from memberquery.domain.query import JoinKind, MemberQuery, Projection
from memberquery.infrastructure.db.models import Member, Team
from memberquery.infrastructure.logging import get_logger

logger = get_logger(__name__)

ATTRIBUTE_COLUMNS: dict[Attribute, Any] = {
    Attribute.member_id: Member.id,
    Attribute.username: Member.username,
    Attribute.age: Member.age,
    Attribute.team_id: Team.id,
    Attribute.team_name: Team.name,
}


def _compile_comparison(comparison: Comparison) -> ColumnElement[bool]:
    column = ATTRIBUTE_COLUMNS[comparison.attribute]
    if comparison.operator is Operator.goe:
        return column >= comparison.value
    if comparison.operator is Operator.loe:
        return column <= comparison.value
    return column == comparison.value


def compile_predicate(predicate: Predicate) -> ColumnElement[bool]:
    return and_(*[_compile_comparison(leaf) for leaf in predicate.leaves()])


def _projection_columns(projection: Projection) -> list[Any]:
    if projection is Projection.member_id:
        return [Member.id]
    if projection is Projection.member_team:
        return [
            Member.id.label("member_id"),
            Member.username,
            Member.age,
            Team.id.label("team_id"),
            Team.name.label("team_name"),
        ]
    if projection in (Projection.member_summary, Projection.username_age):
        return [Member.username, Member.age]
    return [Member]


def resolve_team_join(query: MemberQuery) -> JoinKind:
    if query.team_join is not JoinKind.none:
        return query.team_join
    if query.projection.needs_team:
        return JoinKind.left
    if any(attribute.is_team_attribute for attribute in query.referenced_attributes()):
        return JoinKind.left
    return JoinKind.none


def build_statement(query: MemberQuery) -> Select:
    statement = select(*_projection_columns(query.projection)).select_from(Member)

    team_join = resolve_team_join(query)
    if team_join is JoinKind.inner:
        statement = statement.join(Team, Team.id == Member.team_id)
    elif team_join is JoinKind.left:
        statement = statement.outerjoin(Team, Team.id == Member.team_id)

    if query.predicate is not None:
        statement = statement.where(compile_predicate(query.predicate))

    for order in query.sort:
        column = ATTRIBUTE_COLUMNS[order.attribute]
        statement = statement.order_by(column.desc() if order.direction is SortDirection.desc else column.asc())

    if query.offset is not None:
        statement = statement.offset(query.offset)
    if query.limit is not None:
        statement = statement.limit(query.limit)
    return statement


class SqlAlchemyQueryExecutor:
    def __init__(self, db: Session) -> None:
        self.db = db

    def fetch(self, query: MemberQuery) -> list[Any]:
        result = self.db.execute(build_statement(query))
        if query.projection in (Projection.member, Projection.member_id):
            return list(result.scalars().all())
        if query.projection is Projection.member_team:
            return [MemberTeamView(**row._mapping) for row in result]
        if query.projection is Projection.member_summary:
            return [MemberView(username=row.username, age=row.age) for row in result]
        return [tuple(row) for row in result]

    def count(self, query: MemberQuery) -> int:
        statement = build_statement(query.for_count()).order_by(None)
        total = self.db.execute(select(func.count()).select_from(statement.subquery())).scalar_one()
        logger.debug("member_count_query_executed", projection=query.projection.value, total=total)
        return int(total)
