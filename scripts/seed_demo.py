"""
Seed a development database with demo users, listings, stays and reviews.

Creates the schema tables when --create-tables is given, then inserts a
small data set. This script is idempotent - it does nothing if users
already exist.

Usage:
    python scripts/seed_demo.py --create-tables
    DATABASE_URL=sqlite+aiosqlite:///./lightbnb.db python scripts/seed_demo.py --create-tables
"""

import argparse
import asyncio
import logging
import os
from datetime import date, timedelta

from sqlalchemy import func, select

from lightbnb.core.config import settings
from lightbnb.core.database import close_db, init_db, session_scope
from lightbnb.core.logging_config import setup_logging
from lightbnb.core.probes import check_database
from lightbnb.models import Property, PropertyReview, Reservation, User

logger = logging.getLogger("seed_demo")

# Demo hash of "password"
DEMO_PASSWORD = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."

DEMO_USERS = [
    ("Devin Sanders", "tristanjacobs@gmail.com"),
    ("Iva Harrison", "allisonjackson@mail.com"),
    ("Dominic Parks", "victoriablackwell@outlook.com"),
    ("Derrick Long", "danielshawn@yahoo.ca"),
]

# (owner index, title, city, cost in cents)
DEMO_PROPERTIES = [
    (0, "Speed lamp", "Sotboske", 93061),
    (0, "Blank corner", "Vancouver", 8500),
    (1, "Habit mix", "Vancouver", 23000),
    (2, "Headed know", "Calgary", 5600),
]


async def seed_demo() -> None:
    """
    Insert the demo data set if the users table is empty.

    Every user reviews every listing; guest 3 (Dominic Parks) gets one stay
    in the past and one in the future.
    """
    async with session_scope() as session:
        existing = await session.execute(select(func.count()).select_from(User))
        if existing.scalar_one() > 0:
            logger.info("Users already present. Skipping...")
            return

        users = [User(name=name, email=email, password=DEMO_PASSWORD) for name, email in DEMO_USERS]
        session.add_all(users)
        await session.flush()

        properties = [
            Property(
                owner_id=users[owner].id,
                title=title,
                city=city,
                cost_per_night=cost,
                country="Canada",
                number_of_bedrooms=2,
                number_of_bathrooms=1,
            )
            for owner, title, city, cost in DEMO_PROPERTIES
        ]
        session.add_all(properties)
        await session.flush()

        today = date.today()
        past = Reservation(
            guest_id=users[2].id,
            property_id=properties[1].id,
            start_date=today - timedelta(days=30),
            end_date=today - timedelta(days=25),
        )
        upcoming = Reservation(
            guest_id=users[2].id,
            property_id=properties[2].id,
            start_date=today + timedelta(days=10),
            end_date=today + timedelta(days=14),
        )
        session.add_all([past, upcoming])
        await session.flush()

        reviews = [
            PropertyReview(
                guest_id=user.id,
                property_id=prop.id,
                reservation_id=past.id if prop is properties[1] else None,
                rating=rating,
                message="Demo review",
            )
            for user in users
            for prop, rating in zip(properties, (3, 5, 4, 2))
        ]
        session.add_all(reviews)

    logger.info(
        "Demo data seeded",
        extra={"users": len(DEMO_USERS), "properties": len(DEMO_PROPERTIES)},
    )


async def main(create_tables: bool) -> int:
    try:
        if not await check_database():
            logger.error("Database unreachable, aborting")
            return 1

        if create_tables:
            os.environ["ENABLE_DB_CREATE_ALL"] = "1"
            await init_db()

        await seed_demo()
        return 0
    finally:
        await close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the LightBnB demo data set")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding",
    )
    args = parser.parse_args()

    setup_logging(level=settings.log_level, json_format=settings.log_json)
    raise SystemExit(asyncio.run(main(args.create_tables)))
