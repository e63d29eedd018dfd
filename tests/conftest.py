import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from learnledger.core.database import get_db, init_db
from learnledger.main import app
from learnledger.services import ledger_store


@pytest.fixture
def engine():
    # One shared in-memory database per test
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: the lifespan handler would create tables on the default engine
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def instructor(db):
    ledger_store.register_user(db, "ST-INSTRUCTOR", "Ada", "ada@example.com", "instructor", 1)
    return "ST-INSTRUCTOR"


@pytest.fixture
def student(db):
    ledger_store.register_user(db, "ST-STUDENT", "Bob", "bob@example.com", "student", 1)
    return "ST-STUDENT"


@pytest.fixture
def course_id(db, instructor):
    return ledger_store.create_course(db, instructor, "Intro", "Basics", 2, 10, 20)
