"""Paginated reads with count-query avoidance.

Every strategy resolves its total through ``resolve_total``: when the first page
comes back short it is necessarily the last page, so the total is known without
a second round trip. Any other page pays for a count query.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any

from memberquery.application.errors import ValidationError
from memberquery.domain.paging import Page, PageRequest, SortOrder
from memberquery.domain.predicates import Attribute, Predicate
from memberquery.domain.query import MemberQuery, QueryExecutor
from memberquery.infrastructure.logging import get_logger

logger = get_logger(__name__)

QueryBuilder = Callable[[Predicate | None], MemberQuery]


class PaginationStrategy(str, Enum):
    delegated = "delegated"
    templated = "templated"
    dual_query = "dual_query"


def validate_page_request(page_request: PageRequest) -> None:
    if page_request.limit <= 0:
        raise ValidationError("Page size must be positive")
    if page_request.offset < 0:
        raise ValidationError("Page offset must not be negative")


def resolve_total(content: list[Any], page_request: PageRequest, count_supplier: Callable[[], int]) -> tuple[int, bool]:
    if page_request.offset == 0 and len(content) < page_request.limit:
        return len(content), False
    return count_supplier(), True


def apply_pagination(query: MemberQuery, page_request: PageRequest) -> MemberQuery:
    """Attach sort and window, ending the sort on member id so page boundaries are stable."""
    orders = list(page_request.sort)
    if not any(order.attribute is Attribute.member_id for order in (*query.sort, *orders)):
        orders.append(SortOrder(Attribute.member_id))
    return query.order_by(*orders).paged(page_request.offset, page_request.limit)


def _build_page(
    executor: QueryExecutor,
    page_request: PageRequest,
    content_query: MemberQuery,
    count_query: Callable[[], MemberQuery],
    strategy: PaginationStrategy,
) -> Page[Any]:
    content = executor.fetch(apply_pagination(content_query, page_request))
    total, count_query_executed = resolve_total(
        content,
        page_request,
        lambda: executor.count(count_query().for_count()),
    )
    logger.debug(
        "page_resolved",
        strategy=strategy.value,
        offset=page_request.offset,
        limit=page_request.limit,
        content_size=len(content),
        total=total,
        count_query_executed=count_query_executed,
    )
    return Page(
        items=content,
        total=total,
        offset=page_request.offset,
        limit=page_request.limit,
        count_query_executed=count_query_executed,
    )


def paginate_delegated(executor: QueryExecutor, query: MemberQuery, page_request: PageRequest) -> Page[Any]:
    """Page an already composed query; its count query is derived from the same query."""
    validate_page_request(page_request)
    return _build_page(executor, page_request, query, lambda: query, PaginationStrategy.delegated)


def paginate_templated(
    executor: QueryExecutor,
    page_request: PageRequest,
    predicate: Predicate | None,
    content_builder: QueryBuilder,
) -> Page[Any]:
    """Build content and count queries from one template function."""
    validate_page_request(page_request)
    return _build_page(
        executor,
        page_request,
        content_builder(predicate),
        lambda: content_builder(predicate),
        PaginationStrategy.templated,
    )


def paginate_dual_query(
    executor: QueryExecutor,
    page_request: PageRequest,
    predicate: Predicate | None,
    content_builder: QueryBuilder,
    count_builder: QueryBuilder,
) -> Page[Any]:
    """Use a separately shaped count query that must filter on the same predicate."""
    validate_page_request(page_request)
    return _build_page(
        executor,
        page_request,
        content_builder(predicate),
        lambda: count_builder(predicate),
        PaginationStrategy.dual_query,
    )


def paginate(
    executor: QueryExecutor,
    page_request: PageRequest,
    predicate: Predicate | None,
    content_builder: QueryBuilder,
    count_builder: QueryBuilder | None = None,
    strategy: PaginationStrategy = PaginationStrategy.templated,
) -> Page[Any]:
    if strategy is PaginationStrategy.delegated:
        return paginate_delegated(executor, content_builder(predicate), page_request)
    if strategy is PaginationStrategy.dual_query:
        if count_builder is None:
            raise ValidationError("Dual-query pagination requires a count query builder")
        return paginate_dual_query(executor, page_request, predicate, content_builder, count_builder)
    return paginate_templated(executor, page_request, predicate, content_builder)
