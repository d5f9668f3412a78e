
import pytest
from fastapi.testclient import TestClient
from ab_tester.database import Database, get_db
from ab_tester.main import create_app
from ab_tester.models import Variant


SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"


@pytest.fixture(scope="function")
def database():
    """Fresh tables for each test"""
    database = Database(SQLALCHEMY_DATABASE_URL)
    database.init_db()
    try:
        yield database
    finally:
        database.drop_all()
        database.dispose()


@pytest.fixture(scope="function")
def db(database):
    """Session on the test database"""
    db = database.new_session()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def app(database):
    return create_app(database=database)


@pytest.fixture
def client(app, db):
    """Test client with database dependency override"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_variant(db):
    variant = Variant(
        name="control",
        description="The current checkout page",
        percent=50
    )
    db.add(variant)
    db.commit()
    db.refresh(variant)

    return variant
