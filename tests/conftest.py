"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- Schema creation/teardown around each test
- A seeded data set shared by repository and integration tests
"""

import os
from datetime import date, timedelta

import pytest


# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DEFAULT_RESULT_LIMIT"] = "10"


SEEDED_PASSWORD = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."

# Reference date for reservation fixtures; offsets are wide enough that the
# database's UTC CURRENT_DATE agrees with it
TODAY = date.today()


@pytest.fixture
def anyio_backend():
    """
    Configure anyio backend for async tests.

    Returns:
        str: Backend name ("asyncio")
    """
    return "asyncio"


@pytest.fixture(scope="function")
async def db_session():
    """
    Provide an empty database session for tests.

    Creates tables before test and drops them after.
    """
    from lightbnb.core.database import engine, async_session_maker
    from lightbnb.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(scope="function")
async def seeded_session(db_session):
    """
    Provide a session over committed seed data.

    Users:
        1 Devin Sanders, 2 Iva Harrison (owners),
        3 Dominic Parks (guest with past stays),
        4 Derrick Long (guest with only upcoming/ongoing stays)

    Properties (id, owner, city, cents, average rating):
        1 owner 1, Sotboske,        93061, 5.0
        2 owner 1, Vancouver,        8500, 3.5
        3 owner 2, North Vancouver, 23000, 4.0
        4 owner 2, Calgary,          5600, 2.0
        5 owner 3, Vancouver,        4000, no reviews (never returned by joins)
    """
    from lightbnb.models import Property, PropertyReview, Reservation, User

    db_session.add_all([
        User(id=1, name="Devin Sanders", email="tristanjacobs@gmail.com", password=SEEDED_PASSWORD),
        User(id=2, name="Iva Harrison", email="allisonjackson@mail.com", password=SEEDED_PASSWORD),
        User(id=3, name="Dominic Parks", email="victoriablackwell@outlook.com", password=SEEDED_PASSWORD),
        User(id=4, name="Derrick Long", email="danielshawn@yahoo.ca", password=SEEDED_PASSWORD),
    ])
    await db_session.flush()

    db_session.add_all([
        Property(id=1, owner_id=1, title="Speed lamp", city="Sotboske", cost_per_night=93061,
                 country="Canada", number_of_bedrooms=6, number_of_bathrooms=4, parking_spaces=6),
        Property(id=2, owner_id=1, title="Blank corner", city="Vancouver", cost_per_night=8500,
                 country="Canada", number_of_bedrooms=2, number_of_bathrooms=1),
        Property(id=3, owner_id=2, title="Habit mix", city="North Vancouver", cost_per_night=23000,
                 country="Canada", number_of_bedrooms=3, number_of_bathrooms=2),
        Property(id=4, owner_id=2, title="Headed know", city="Calgary", cost_per_night=5600,
                 country="Canada", number_of_bedrooms=1, number_of_bathrooms=1),
        Property(id=5, owner_id=3, title="Unreviewed loft", city="Vancouver", cost_per_night=4000,
                 country="Canada"),
    ])
    await db_session.flush()

    db_session.add_all([
        Reservation(id=1, guest_id=3, property_id=2,
                    start_date=TODAY - timedelta(days=60), end_date=TODAY - timedelta(days=55)),
        Reservation(id=2, guest_id=3, property_id=3,
                    start_date=TODAY - timedelta(days=20), end_date=TODAY - timedelta(days=15)),
        Reservation(id=3, guest_id=3, property_id=1,
                    start_date=TODAY + timedelta(days=5), end_date=TODAY + timedelta(days=10)),
        Reservation(id=4, guest_id=4, property_id=4,
                    start_date=TODAY + timedelta(days=3), end_date=TODAY + timedelta(days=6)),
        Reservation(id=5, guest_id=4, property_id=1,
                    start_date=TODAY - timedelta(days=2), end_date=TODAY + timedelta(days=2)),
    ])
    await db_session.flush()

    db_session.add_all([
        PropertyReview(guest_id=3, property_id=1, rating=5),
        PropertyReview(guest_id=4, property_id=1, rating=5),
        PropertyReview(guest_id=3, property_id=2, reservation_id=1, rating=3),
        PropertyReview(guest_id=4, property_id=2, rating=4),
        PropertyReview(guest_id=3, property_id=3, reservation_id=2, rating=4),
        PropertyReview(guest_id=1, property_id=4, rating=2),
    ])
    await db_session.commit()

    yield db_session


@pytest.fixture
def seeded_user():
    """The user the lookup scenarios expect to find."""
    return {
        "id": 3,
        "name": "Dominic Parks",
        "email": "victoriablackwell@outlook.com",
        "password": SEEDED_PASSWORD,
    }
