"""
Property repository for listing search and listing creation.

Search reads from the database. Creation only writes to a process-local
InMemoryPropertyStore: created listings are not persisted, do not survive a
restart, and never show up in search results.

Store ids are a separate sequence from properties.id: the process-wide store
starts empty, so its first id is 1 and can equal the id of an unrelated
database row. Pass a seed to InMemoryPropertyStore to continue a known
sequence instead.
"""

import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from lightbnb.core.config import settings
from lightbnb.core.logging_config import log_with_context
from lightbnb.repositories.property_search import PropertySearchQuery
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyRecord,
    PropertySearchOptions,
    PropertyWithRating,
)

logger = logging.getLogger(__name__)


class InMemoryPropertyStore:
    """
    Non-durable, process-local collection of created properties.

    Ids are synthetic: one past the highest id held, which is the collection
    size plus one when ids are contiguous. Assignment happens under a lock so
    concurrent callers never share an id.
    """

    def __init__(self, seed: Optional[Iterable[Union[PropertyRecord, Mapping[str, Any]]]] = None):
        self._lock = threading.Lock()
        self._properties: Dict[int, PropertyRecord] = {}

        for item in seed or ():
            record = PropertyRecord.model_validate(item)
            self._properties[record.id] = record

    def __len__(self) -> int:
        return len(self._properties)

    def add(self, new_property: PropertyCreate) -> PropertyRecord:
        with self._lock:
            property_id = max(self._properties, default=0) + 1
            record = PropertyRecord(id=property_id, **new_property.model_dump())
            self._properties[property_id] = record
        return record

    def get(self, property_id: int) -> Optional[PropertyRecord]:
        return self._properties.get(property_id)

    def all(self) -> List[PropertyRecord]:
        return list(self._properties.values())


# Process-wide store used when no store is injected
property_store = InMemoryPropertyStore()


class PropertyRepository:
    """
    Repository for property data access.

    Attributes:
        session: SQLAlchemy async session for database operations
        store: In-memory collection used by add_property
    """

    def __init__(self, session: Optional[AsyncSession], store: Optional[InMemoryPropertyStore] = None):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session (may be None when only add_property is used)
            store: In-memory property store; defaults to the process-wide one
        """
        self.session = session
        self.store = store if store is not None else property_store

    async def get_all_properties(
        self,
        options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None,
    ) -> List[PropertyWithRating]:
        """
        Search properties with optional filters.

        Args:
            options: Any of city, owner_id, minimum_price_per_night,
                maximum_price_per_night (dollars, both or neither) and
                minimum_rating
            limit: Maximum number of results (default: settings.default_result_limit)

        Returns:
            Properties with their average rating, cheapest first.
            Empty list when nothing matches.

        Example:
            >>> results = await repo.get_all_properties(
            ...     {"city": "Vancouver", "minimum_rating": 4}, limit=5
            ... )
            >>> [p.cost_per_night for p in results]
            [9300, 15100, 24300]
        """
        if options is None:
            search = PropertySearchOptions()
        elif isinstance(options, PropertySearchOptions):
            search = options
        else:
            search = PropertySearchOptions.model_validate(dict(options))

        if limit is None:
            limit = settings.default_result_limit

        if (search.minimum_price_per_night is None) != (search.maximum_price_per_night is None):
            logger.warning(
                "Ignoring price filter: both minimum and maximum price are required",
                extra={"operation": "get_all_properties"},
            )

        query = PropertySearchQuery.from_options(search, limit)
        stmt = query.build()

        log_with_context(
            logger,
            "debug",
            "Property search built",
            operation="get_all_properties",
            params=query.parameters,
            sql=str(stmt),
        )

        result = await self.session.execute(stmt)
        rows = result.all()

        properties = [
            PropertyWithRating.model_validate({
                **prop.to_dict(),
                "average_rating": float(rating) if rating is not None else None,
            })
            for prop, rating in rows
        ]

        log_with_context(
            logger,
            "debug",
            "Property search completed",
            operation="get_all_properties",
            row_count=len(properties),
        )

        return properties

    async def add_property(
        self,
        new_property: Union[PropertyCreate, Mapping[str, Any]],
    ) -> PropertyRecord:
        """
        Add a property to the in-memory store.

        The database is not touched.

        Args:
            new_property: Listing fields

        Returns:
            The stored property with its synthetic id
        """
        if not isinstance(new_property, PropertyCreate):
            new_property = PropertyCreate.model_validate(dict(new_property))

        record = self.store.add(new_property)
        logger.info(
            "Property added to in-memory store",
            extra={"operation": "add_property", "property_id": record.id},
        )
        return record
