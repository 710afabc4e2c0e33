import os

# Configure before the app is imported
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.database import Base, get_db
from app.models.property import Property

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Inserted in order, so ids are 1..6
SEED_PROPERTIES = [
    {"address": "16 Sweetwater Lane, Austin", "price": 4850000, "bedrooms": 3, "bathrooms": 2, "type": "House"},
    {"address": "720 Harbor View Drive #4B", "price": 9375751, "bedrooms": 3, "bathrooms": 6, "type": None},
    {"address": "90678 South Vellum Extension #6A2", "price": 12104869, "bedrooms": 5, "bathrooms": 4, "type": None},
    {"address": "3 Sweet Briar Court", "price": 715000, "bedrooms": 2, "bathrooms": 1, "type": "Apartment"},
    {"address": "4100 Lakeshore Boulevard", "price": 10000000, "bedrooms": 6, "bathrooms": 5, "type": "House"},
    {"address": "55 Market Street, Unit 12", "price": 1250000, "bedrooms": 1, "bathrooms": 1, "type": "Condo"},
]


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def seeded_properties(db_session):
    """Insert the sample properties and return them as dicts including their ids."""
    records = []
    for values in SEED_PROPERTIES:
        prop = Property(**values)
        db_session.add(prop)
        db_session.commit()
        db_session.refresh(prop)
        records.append({"id": prop.id, **values})
    return records


@pytest.fixture
def property_payload():
    return {
        "address": "221B Baker Street",
        "price": 875000,
        "bedrooms": 2,
        "bathrooms": 1,
        "type": "Flat",
    }
