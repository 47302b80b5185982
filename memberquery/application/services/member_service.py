from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from memberquery.application.errors import ConflictError, NotFoundError
from memberquery.application.services.condition_service import compile_condition
from memberquery.application.services.pagination_service import (
    PaginationStrategy,
    paginate,
    paginate_delegated,
    paginate_dual_query,
    paginate_templated,
)
from memberquery.domain.member_views import MemberTeamView
from memberquery.domain.paging import Page, PageRequest, SortOrder
from memberquery.domain.predicates import Attribute, Predicate
from memberquery.domain.query import MemberQuery, Projection
from memberquery.domain.search_condition import SearchCondition
from memberquery.infrastructure.db.member_query_executor import SqlAlchemyQueryExecutor
from memberquery.infrastructure.db.models import Member, Team
from memberquery.infrastructure.logging import get_logger

logger = get_logger(__name__)


def serialize_member_response(member: Member) -> dict:
    return {
        "id": member.id,
        "username": member.username,
        "age": member.age,
        "team_id": member.team_id,
        "team_name": member.team.name if member.team is not None else None,
        "created_at": member.created_at,
        "updated_at": member.updated_at,
    }


def create_team(db: Session, name: str) -> Team:
    existing = db.execute(select(Team).where(Team.name == name)).scalar_one_or_none()
    if existing is not None:
        raise ConflictError("Team name already exists")
    team = Team(name=name)
    db.add(team)
    db.commit()
    db.refresh(team)
    logger.info("team_created", team_id=team.id, name=team.name)
    return team


def create_member(db: Session, username: str, age: int, team_id: int | None = None) -> Member:
    if team_id is not None:
        team = db.execute(select(Team).where(Team.id == team_id)).scalar_one_or_none()
        if team is None:
            raise NotFoundError("Team not found")
    member = Member(username=username, age=age, team_id=team_id)
    db.add(member)
    db.commit()
    db.refresh(member)
    logger.info("member_created", member_id=member.id, team_id=team_id)
    return member


def get_member_by_id(db: Session, member_id: int) -> Member:
    member = db.execute(select(Member).where(Member.id == member_id)).scalar_one_or_none()
    if member is None:
        raise NotFoundError("Member not found")
    return member


def list_members(db: Session) -> list[Member]:
    return list(db.execute(select(Member).order_by(Member.id)).scalars().all())


def list_members_by_username(db: Session, username: str) -> list[Member]:
    return list(db.execute(select(Member).where(Member.username == username).order_by(Member.id)).scalars().all())


def member_team_query(predicate: Predicate | None) -> MemberQuery:
    return MemberQuery().select(Projection.member_team).left_join_team().where(predicate)


def member_count_query(predicate: Predicate | None) -> MemberQuery:
    query = MemberQuery().select(Projection.member_id).where(predicate)
    if predicate is not None and any(attribute.is_team_attribute for attribute in predicate.attributes()):
        # rows without a team never match a team filter
        query = query.join_team()
    return query


def search_members(db: Session, condition: SearchCondition) -> list[MemberTeamView]:
    query = member_team_query(compile_condition(condition)).order_by(SortOrder(Attribute.member_id))
    return SqlAlchemyQueryExecutor(db).fetch(query)


def _log_page(strategy: PaginationStrategy, condition: SearchCondition, page: Page[Any]) -> None:
    logger.info(
        "member_search_page_resolved",
        strategy=strategy.value,
        condition=condition.model_dump(exclude_none=True),
        offset=page.offset,
        limit=page.limit,
        total=page.total,
        count_query_executed=page.count_query_executed,
    )


def search_page_delegated(db: Session, condition: SearchCondition, page_request: PageRequest) -> Page[MemberTeamView]:
    query = member_team_query(compile_condition(condition))
    page = paginate_delegated(SqlAlchemyQueryExecutor(db), query, page_request)
    _log_page(PaginationStrategy.delegated, condition, page)
    return page


def search_page_templated(db: Session, condition: SearchCondition, page_request: PageRequest) -> Page[MemberTeamView]:
    page = paginate_templated(
        SqlAlchemyQueryExecutor(db),
        page_request,
        compile_condition(condition),
        member_team_query,
    )
    _log_page(PaginationStrategy.templated, condition, page)
    return page


def search_page_dual_query(db: Session, condition: SearchCondition, page_request: PageRequest) -> Page[MemberTeamView]:
    page = paginate_dual_query(
        SqlAlchemyQueryExecutor(db),
        page_request,
        compile_condition(condition),
        member_team_query,
        member_count_query,
    )
    _log_page(PaginationStrategy.dual_query, condition, page)
    return page


def search_page(
    db: Session,
    condition: SearchCondition,
    page_request: PageRequest,
    strategy: PaginationStrategy = PaginationStrategy.templated,
) -> Page[MemberTeamView]:
    page = paginate(
        SqlAlchemyQueryExecutor(db),
        page_request,
        compile_condition(condition),
        member_team_query,
        count_builder=member_count_query,
        strategy=strategy,
    )
    _log_page(strategy, condition, page)
    return page
