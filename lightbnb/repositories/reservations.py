"""
Reservation repository for a guest's stay history.
"""

import logging
from datetime import date
from typing import List, Optional, Union

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lightbnb.core.config import settings
from lightbnb.models.property import Property
from lightbnb.models.reservation import PropertyReview, Reservation
from lightbnb.schemas.property import ReservedProperty
from lightbnb.schemas.user import parse_user_id

logger = logging.getLogger(__name__)


class ReservationRepository:
    """
    Repository for reservation data access.

    Attributes:
        session: SQLAlchemy async session for database operations
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all_reservations(
        self,
        guest_id: Union[int, str],
        limit: Optional[int] = None,
        as_of: Optional[date] = None,
    ) -> Optional[List[ReservedProperty]]:
        """
        List the properties of a guest's completed reservations.

        A reservation is completed when its end_date is strictly before
        today. Each entry carries the property's average review rating and
        the reservation's start_date; most recent stays first.

        Args:
            guest_id: Guest user id
            limit: Maximum number of rows (default: settings.default_result_limit)
            as_of: Reference date; defaults to the database's CURRENT_DATE

        Raises:
            ValueError: If guest_id is not an integral number

        Returns:
            List of reserved properties, or None when the guest has no
            completed reservation. Unlike get_all_properties, an empty
            result is None, not [].
        """
        guest_id = parse_user_id(guest_id)

        if limit is None:
            limit = settings.default_result_limit

        cutoff = as_of if as_of is not None else func.current_date()

        stmt = (
            select(
                Property,
                func.avg(PropertyReview.rating).label("average_rating"),
                Reservation.start_date,
            )
            .join(Reservation, Property.id == Reservation.property_id)
            .join(PropertyReview, Property.id == PropertyReview.property_id)
            .where(
                Reservation.guest_id == guest_id,
                Reservation.end_date < cutoff,
            )
            .group_by(Property.id, Reservation.start_date)
            .order_by(desc(Reservation.start_date))
            .limit(limit)
        )

        result = await self.session.execute(stmt)
        rows = result.all()

        logger.debug(
            "Reservations fetched",
            extra={"operation": "get_all_reservations", "guest_id": guest_id, "row_count": len(rows)},
        )

        if not rows:
            return None

        return [
            ReservedProperty.model_validate({
                **prop.to_dict(),
                "average_rating": float(rating) if rating is not None else None,
                "start_date": start_date,
            })
            for prop, rating, start_date in rows
        ]
