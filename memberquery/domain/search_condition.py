from pydantic import BaseModel, ConfigDict


def has_text(value: str | None) -> bool:
    return value is not None and value.strip() != ""


class SearchCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str | None = None
    team_name: str | None = None
    age_at_least: int | None = None
    age_at_most: int | None = None
