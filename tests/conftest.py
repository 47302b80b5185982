import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("CREATE_SCHEMA_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from memberquery.infrastructure.db import models  # noqa: F401
from memberquery.infrastructure.db.session import Base, get_db
from memberquery.main import app
from tests.helpers.factories import create_member, create_team


@pytest.fixture(scope="session")
def engine():
    database_url = os.environ.get("TEST_DATABASE_URL", "sqlite+pysqlite:///:memory:")
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, future=True)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(autouse=True)
def clean_database(engine):
    yield
    with engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())


@pytest.fixture
def db_session(engine):
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_members(db_session):
    team_a = create_team(db_session, "teamA")
    team_b = create_team(db_session, "teamB")
    members = [
        create_member(db_session, "member1", 10, team_a),
        create_member(db_session, "member2", 20, team_a),
        create_member(db_session, "member3", 30, team_b),
        create_member(db_session, "member4", 40, team_b),
    ]
    return {"team_a": team_a, "team_b": team_b, "members": members}
