from pydantic import BaseModel

from memberquery.domain.paging import Page


class PaginationMeta(BaseModel):
    offset: int
    limit: int
    total: int
    total_pages: int
    current_page: int
    has_next: bool
    has_prev: bool
    count_query_executed: bool

    @classmethod
    def from_page(cls, page: Page) -> "PaginationMeta":
        return cls(
            offset=page.offset,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
            current_page=page.current_page,
            has_next=page.has_next,
            has_prev=page.has_prev,
            count_query_executed=page.count_query_executed,
        )
