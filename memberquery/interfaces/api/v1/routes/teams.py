from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from memberquery.application.services.member_service import create_team
from memberquery.infrastructure.db.session import get_db
from memberquery.interfaces.api.v1.schemas.member import TeamCreate, TeamResponse

router = APIRouter(prefix="/teams", tags=["teams"])


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED, summary="Create team")
def create_team_endpoint(payload: TeamCreate, db: Session = Depends(get_db)):
    team = create_team(db=db, name=payload.name)
    return {"id": team.id, "name": team.name, "created_at": team.created_at, "updated_at": team.updated_at}
