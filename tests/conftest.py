import os

# Settings are read at import time, so configure them before importing car_rental
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CACHE_ENABLED"] = "false"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from car_rental.core.security import create_access_token
from car_rental.db.session import get_db
from car_rental.main import app
from car_rental.models import Base, User, UserRole
from car_rental.schemas.vehicle_schemas import VehicleCreate

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_user(db, email, role, name=None, is_active=True):
    user = User(email=email, name=name or email.split("@")[0].title(), role=role, is_active=is_active)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def vendor(db):
    return make_user(db, "vendor@example.com", UserRole.VENDOR, name="Victor Vendor")


@pytest.fixture
def other_vendor(db):
    return make_user(db, "other.vendor@example.com", UserRole.VENDOR, name="Olga Vendor")


@pytest.fixture
def admin(db):
    return make_user(db, "admin@example.com", UserRole.ADMIN, name="Ada Admin")


@pytest.fixture
def renter(db):
    return make_user(db, "renter@example.com", UserRole.RENTER, name="Rita Renter")


def auth_headers(email):
    return {"Authorization": f"Bearer {create_access_token(email)}"}


def vehicle_payload(**overrides):
    payload = {
        "make": "Honda",
        "model": "Accord",
        "year": 2022,
        "color": "Silver",
        "license_plate": "ABC-123",
        "vin": "1HGCM82633A004352",
        "price_per_day": 55.0,
        "fuel_type": "Petrol",
        "transmission": "Automatic",
        "seating_capacity": 5,
        "description": "Comfortable sedan",
        "image_url": "https://images.example.com/accord.jpg",
    }
    payload.update(overrides)
    return payload


def vehicle_in(**overrides):
    return VehicleCreate(**vehicle_payload(**overrides))
