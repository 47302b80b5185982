from pydantic import BaseModel, ConfigDict


class MemberTeamView(BaseModel):
    model_config = ConfigDict(frozen=True)

    member_id: int
    username: str
    age: int
    team_id: int | None
    team_name: str | None


class MemberView(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    age: int
