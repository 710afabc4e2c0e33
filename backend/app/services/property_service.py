import logging
from typing import List, Union

from sqlalchemy import and_, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import PropertyNotFoundError
from app.models.property import Property
from app.schemas.property import (
    PropertyCreate, PropertyUpdate, PropertyResponse, PropertyListParams,
    PropertyOrderBy, SortOrder, PaginationResponse, PropertiesResponse
)

logger = logging.getLogger(__name__)

ORDER_COLUMNS = {
    PropertyOrderBy.ID: Property.id,
    PropertyOrderBy.ADDRESS: Property.address,
    PropertyOrderBy.PRICE: Property.price,
    PropertyOrderBy.BEDROOMS: Property.bedrooms,
    PropertyOrderBy.BATHROOMS: Property.bathrooms,
    PropertyOrderBy.TYPE: Property.type,
}


def build_property_filters(params: PropertyListParams) -> List:
    """Translate list parameters into SQLAlchemy clauses, to be ANDed together.

    A single price bound is exclusive; when both bounds are given the range is
    inclusive on both ends.
    """
    clauses = []

    if params.address is not None:
        clauses.append(Property.address.icontains(params.address, autoescape=True))

    if params.price_min is not None and params.price_max is None:
        clauses.append(Property.price > params.price_min)
    elif params.price_max is not None and params.price_min is None:
        clauses.append(Property.price < params.price_max)
    elif params.price_min is not None and params.price_max is not None:
        clauses.append(and_(Property.price >= params.price_min, Property.price <= params.price_max))

    if params.bedrooms is not None:
        clauses.append(Property.bedrooms == params.bedrooms)
    if params.bathrooms is not None:
        clauses.append(Property.bathrooms == params.bathrooms)

    if params.type is not None:
        clauses.append(func.lower(Property.type) == params.type.lower())

    return clauses


def build_property_ordering(order_by: PropertyOrderBy, order: SortOrder) -> List:
    column = ORDER_COLUMNS[order_by]
    ordering = [column.desc() if order == SortOrder.DESC else column.asc()]
    # Deterministic pages when the sort column has duplicates
    if order_by != PropertyOrderBy.ID:
        ordering.append(Property.id.asc())
    return ordering


class PropertyService:
    """Record operations for the properties table."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self, params: PropertyListParams) -> PropertiesResponse:
        query = self.db.query(Property).filter(*build_property_filters(params))

        count = query.count()
        results = (
            query.order_by(*build_property_ordering(params.order_by, params.order))
            .offset(params.skip)
            .limit(params.take)
            .all()
        )

        return PropertiesResponse(
            properties=[PropertyResponse.model_validate(prop) for prop in results],
            pagination=PaginationResponse(skip=params.skip, take=params.take, count=count),
        )

    def get_by_id(self, property_id: int) -> Property:
        prop = self.db.query(Property).filter(Property.id == property_id).first()
        if not prop:
            raise PropertyNotFoundError()
        return prop

    def exists(self, property_id: int) -> bool:
        return self.db.query(Property.id).filter(Property.id == property_id).first() is not None

    def create(self, prop_data: PropertyCreate) -> Property:
        prop = Property(**prop_data.model_dump())
        try:
            self.db.add(prop)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(prop)
        logger.info(f"Created property {prop.id} at '{prop.address}'")
        return prop

    def update(self, property_id: int, prop_data: PropertyUpdate) -> Union[PropertyResponse, bool]:
        """Replace every field of a property.

        Returns the updated record, or False when the write affected no row
        even though the existence check passed.
        """
        if not self.exists(property_id):
            raise PropertyNotFoundError()

        values = prop_data.model_dump()
        try:
            affected = (
                self.db.query(Property)
                .filter(Property.id == property_id)
                .update(values, synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        if affected != 1:
            logger.warning(f"Update of property {property_id} affected {affected} rows")
            return False

        logger.info(f"Updated property {property_id}")
        return PropertyResponse(id=property_id, **values)

    def delete(self, property_id: int) -> bool:
        if not self.exists(property_id):
            raise PropertyNotFoundError()

        try:
            affected = (
                self.db.query(Property)
                .filter(Property.id == property_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        if affected != 1:
            logger.warning(f"Delete of property {property_id} affected {affected} rows")
            return False

        logger.info(f"Deleted property {property_id}")
        return True
