from sqlalchemy import select
from sqlalchemy.orm import Session

from memberquery.infrastructure.db.models import Member, Team
from memberquery.infrastructure.db.session import SessionLocal, create_schema
from memberquery.infrastructure.logging import configure_logging, get_logger

logger = get_logger(__name__)

TEAM_NAMES = ("teamA", "teamB")
MEMBER_COUNT = 100


def create_team_if_missing(db: Session, name: str) -> Team:
    team = db.execute(select(Team).where(Team.name == name)).scalar_one_or_none()
    if team is not None:
        return team

    team = Team(name=name)
    db.add(team)
    db.flush()
    return team


def create_member_if_missing(db: Session, username: str, age: int, team: Team) -> bool:
    existing_id = db.execute(select(Member.id).where(Member.username == username).limit(1)).scalar_one_or_none()
    if existing_id is not None:
        return False
    db.add(Member(username=username, age=age, team_id=team.id))
    return True


def seed(db: Session) -> int:
    teams = [create_team_if_missing(db, name) for name in TEAM_NAMES]
    created = 0
    for index in range(MEMBER_COUNT):
        team = teams[index % len(teams)]
        if create_member_if_missing(db, f"member{index}", index, team):
            created += 1
    db.commit()
    return created


def main() -> None:
    configure_logging()
    create_schema()
    db = SessionLocal()
    try:
        created = seed(db)
    finally:
        db.close()
    logger.info("seed_completed", teams=len(TEAM_NAMES), members_created=created)


if __name__ == "__main__":
    main()
