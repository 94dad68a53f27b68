"""
Query builder for the filtered property search.

Filters are collected as an ordered list of predicates, each tagged with the
stage it applies to (row filter before grouping, or aggregate filter after
it) and the values it binds. The statement is assembled once, in build().

Positional parameter order always follows SQL clause order:
WHERE predicates (insertion order), then HAVING predicates, then LIMIT.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Tuple

from sqlalchemy import Select, and_, func, select
from sqlalchemy.sql.elements import ColumnElement

from lightbnb.models.property import Property
from lightbnb.models.reservation import PropertyReview
from lightbnb.schemas.property import PropertySearchOptions


class SearchStage(str, Enum):
    WHERE = "where"
    HAVING = "having"


@dataclass(frozen=True)
class SearchPredicate:
    stage: SearchStage
    clause: ColumnElement
    parameters: Tuple[Any, ...]


def dollars_to_cents(amount: float) -> int:
    return int(round(amount * 100))


def average_rating() -> ColumnElement:
    return func.avg(PropertyReview.rating)


class PropertySearchQuery:
    """
    Builder for the property search statement.

    Base statement: properties joined to their reviews, grouped per
    property, with the averaged rating as ``average_rating``, ordered by
    ascending cost_per_night and capped at ``limit``.

    Example:
        >>> query = (
        ...     PropertySearchQuery(limit=10)
        ...     .where(Property.city.like("%Van%"), "%Van%")
        ...     .having(average_rating() >= 4.0, 4.0)
        ... )
        >>> query.parameters
        ['%Van%', 4.0, 10]
    """

    def __init__(self, limit: int):
        self.limit = limit
        self._predicates: List[SearchPredicate] = []

    def where(self, clause: ColumnElement, *parameters: Any) -> "PropertySearchQuery":
        self._predicates.append(SearchPredicate(SearchStage.WHERE, clause, parameters))
        return self

    def having(self, clause: ColumnElement, *parameters: Any) -> "PropertySearchQuery":
        self._predicates.append(SearchPredicate(SearchStage.HAVING, clause, parameters))
        return self

    @property
    def predicates(self) -> Tuple[SearchPredicate, ...]:
        return tuple(self._predicates)

    def _stage(self, stage: SearchStage) -> List[SearchPredicate]:
        return [p for p in self._predicates if p.stage is stage]

    @property
    def parameters(self) -> List[Any]:
        """Values in the order the compiled statement binds them."""
        params: List[Any] = []
        for stage in (SearchStage.WHERE, SearchStage.HAVING):
            for predicate in self._stage(stage):
                params.extend(predicate.parameters)
        params.append(self.limit)
        return params

    def build(self) -> Select:
        stmt = (
            select(Property, average_rating().label("average_rating"))
            .join(PropertyReview, Property.id == PropertyReview.property_id)
        )

        where_clauses = [p.clause for p in self._stage(SearchStage.WHERE)]
        if where_clauses:
            stmt = stmt.where(and_(*where_clauses))

        stmt = stmt.group_by(Property.id, Property.cost_per_night)

        having_clauses = [p.clause for p in self._stage(SearchStage.HAVING)]
        if having_clauses:
            stmt = stmt.having(and_(*having_clauses))

        return stmt.order_by(Property.cost_per_night).limit(self.limit)

    @classmethod
    def from_options(
        cls,
        options: PropertySearchOptions,
        limit: int,
    ) -> "PropertySearchQuery":
        """
        Translate search options into predicates.

        Args:
            options: Validated search filters
            limit: Maximum number of properties to return

        Returns:
            Builder holding one predicate per supplied filter
        """
        query = cls(limit)

        if options.city:
            pattern = f"%{options.city}%"
            query.where(Property.city.like(pattern), pattern)

        if options.owner_id is not None:
            query.where(Property.owner_id == options.owner_id, options.owner_id)

        if options.has_price_range:
            minimum = dollars_to_cents(options.minimum_price_per_night)
            maximum = dollars_to_cents(options.maximum_price_per_night)
            query.where(
                and_(
                    Property.cost_per_night >= minimum,
                    Property.cost_per_night <= maximum,
                ),
                minimum,
                maximum,
            )

        if options.minimum_rating is not None:
            query.having(average_rating() >= options.minimum_rating, options.minimum_rating)

        return query
