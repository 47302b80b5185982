from datetime import datetime

from pydantic import BaseModel, Field

from memberquery.domain.member_views import MemberTeamView
from memberquery.interfaces.api.v1.schemas.pagination import PaginationMeta


class TeamCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class TeamResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class MemberCreate(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    age: int = Field(ge=0)
    team_id: int | None = None


class MemberResponse(BaseModel):
    id: int
    username: str
    age: int
    team_id: int | None
    team_name: str | None
    created_at: datetime
    updated_at: datetime


class MemberSearchResponse(BaseModel):
    items: list[MemberTeamView]


class MemberPageResponse(BaseModel):
    items: list[MemberTeamView]
    pagination: PaginationMeta
