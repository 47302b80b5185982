from fastapi import Query

from memberquery.application.services.pagination_service import PaginationStrategy
from memberquery.config import settings
from memberquery.domain.paging import PageRequest, SortOrder
from memberquery.domain.search_condition import SearchCondition


def get_search_condition(
    username: str | None = Query(default=None),
    team_name: str | None = Query(default=None),
    age_at_least: int | None = Query(default=None),
    age_at_most: int | None = Query(default=None),
) -> SearchCondition:
    return SearchCondition(
        username=username,
        team_name=team_name,
        age_at_least=age_at_least,
        age_at_most=age_at_most,
    )


def get_page_request(
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=settings.default_page_limit, ge=1, le=settings.max_page_limit),
    sort: list[str] = Query(default=[], description="Repeatable `attribute[,asc|desc]`, e.g. `username,desc`."),
) -> PageRequest:
    return PageRequest(offset=offset, limit=limit, sort=tuple(SortOrder.parse(raw) for raw in sort))


def get_pagination_strategy(
    strategy: PaginationStrategy = Query(default=PaginationStrategy.templated),
) -> PaginationStrategy:
    return strategy
