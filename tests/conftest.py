from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import taskboard.models  # noqa: F401
from taskboard.database import Base, get_db
from taskboard.main import app
from taskboard.services import BoardService, IdentityBroker, get_identity_broker

TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def db_session() -> Session:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def identity() -> IdentityBroker:
    # Minimum bcrypt cost keeps the suite fast.
    return IdentityBroker(secret_key="test-secret", token_ttl=timedelta(hours=24), bcrypt_rounds=4)


@pytest.fixture
def service(db_session: Session, identity: IdentityBroker) -> BoardService:
    return BoardService(db_session, identity)


@pytest.fixture
def client_factory(identity: IdentityBroker):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_broker] = lambda: identity
    try:
        yield lambda: TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client(client_factory) -> TestClient:
    return client_factory()
