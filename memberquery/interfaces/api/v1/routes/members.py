from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from memberquery.application.services.member_service import (
    create_member,
    get_member_by_id,
    search_members,
    search_page,
    serialize_member_response,
)
from memberquery.application.services.pagination_service import PaginationStrategy
from memberquery.domain.paging import PageRequest
from memberquery.domain.search_condition import SearchCondition
from memberquery.infrastructure.db.session import get_db
from memberquery.interfaces.api.v1.dependencies.pagination import (
    get_page_request,
    get_pagination_strategy,
    get_search_condition,
)
from memberquery.interfaces.api.v1.schemas.member import (
    MemberCreate,
    MemberPageResponse,
    MemberResponse,
    MemberSearchResponse,
)
from memberquery.interfaces.api.v1.schemas.pagination import PaginationMeta

router = APIRouter(prefix="/members", tags=["members"])


@router.get(
    "/search",
    response_model=MemberSearchResponse,
    summary="Search members",
    description="Unpaginated member/team search. Absent or blank filters are ignored.",
)
def search_members_endpoint(
    condition: SearchCondition = Depends(get_search_condition),
    db: Session = Depends(get_db),
):
    return {"items": search_members(db=db, condition=condition)}


@router.get(
    "/page",
    response_model=MemberPageResponse,
    summary="Search members page",
    description=(
        "Paginated member/team search. The count query is skipped when the first page is not full. "
        "`strategy` selects delegated, templated, or dual-query pagination."
    ),
    responses={400: {"description": "Invalid sort or strategy parameters"}},
)
def search_member_page_endpoint(
    condition: SearchCondition = Depends(get_search_condition),
    page_request: PageRequest = Depends(get_page_request),
    strategy: PaginationStrategy = Depends(get_pagination_strategy),
    db: Session = Depends(get_db),
):
    page = search_page(db=db, condition=condition, page_request=page_request, strategy=strategy)
    return {"items": page.items, "pagination": PaginationMeta.from_page(page)}


@router.post(
    "",
    response_model=MemberResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create member",
    responses={404: {"description": "Team not found"}},
)
def create_member_endpoint(payload: MemberCreate, db: Session = Depends(get_db)):
    member = create_member(db=db, username=payload.username, age=payload.age, team_id=payload.team_id)
    return serialize_member_response(member)


@router.get(
    "/{member_id}",
    response_model=MemberResponse,
    summary="Get member by id",
    responses={404: {"description": "Member not found"}},
)
def get_member(member_id: int, db: Session = Depends(get_db)):
    return serialize_member_response(get_member_by_id(db=db, member_id=member_id))
