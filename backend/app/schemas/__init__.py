from app.schemas.property import (
    PropertyCreate, PropertyUpdate, PropertyResponse, PropertyListParams,
    PropertyOrderBy, SortOrder, PaginationResponse, PropertiesResponse
)

__all__ = [
    "PropertyCreate", "PropertyUpdate", "PropertyResponse", "PropertyListParams",
    "PropertyOrderBy", "SortOrder", "PaginationResponse", "PropertiesResponse",
]
