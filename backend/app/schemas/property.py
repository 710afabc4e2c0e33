import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.config import settings

# Range of a 64-bit signed INTEGER column
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

INTEGER_STRING = re.compile(r"^[+-]?\d+$")


def check_number(value):
    """Reject booleans, which pydantic would otherwise coerce to 0/1."""
    if isinstance(value, bool):
        raise ValueError("Input should be a number")
    return value


def check_integer(value):
    """Reject booleans and strings that are not plain integers (e.g. "1.0")."""
    check_number(value)
    if isinstance(value, str) and not INTEGER_STRING.match(value.strip()):
        raise ValueError("Input should be a valid integer")
    return value


class PropertyOrderBy(str, Enum):
    ID = "id"
    ADDRESS = "address"
    PRICE = "price"
    BEDROOMS = "bedrooms"
    BATHROOMS = "bathrooms"
    TYPE = "type"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class PropertyBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    address: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    bedrooms: int = Field(..., ge=0, le=INT_MAX)
    bathrooms: int = Field(..., ge=0, le=INT_MAX)
    type: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def price_is_number(cls, value):
        return check_number(value)

    @field_validator("bedrooms", "bathrooms", mode="before")
    @classmethod
    def rooms_are_integers(cls, value):
        return check_integer(value)


class PropertyCreate(PropertyBase):
    pass


class PropertyUpdate(PropertyBase):
    """Full replacement: every required field must be supplied."""
    pass


class PropertyResponse(PropertyBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class PropertyListParams(BaseModel):
    """Typed query parameters for listing properties."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    skip: int = Field(settings.PAGINATION_SKIP_DEFAULT, ge=settings.PAGINATION_SKIP_MIN, le=INT_MAX)
    take: int = Field(
        settings.PAGINATION_TAKE_DEFAULT,
        ge=settings.PAGINATION_TAKE_MIN,
        le=settings.PAGINATION_TAKE_MAX,
    )
    address: Optional[str] = Field(None, min_length=3)
    price_min: Optional[float] = Field(None, ge=0, allow_inf_nan=False, alias="priceMin")
    price_max: Optional[float] = Field(None, ge=0, allow_inf_nan=False, alias="priceMax")
    bedrooms: Optional[int] = Field(None, ge=0, le=INT_MAX)
    bathrooms: Optional[int] = Field(None, ge=0, le=INT_MAX)
    type: Optional[str] = None
    order_by: PropertyOrderBy = Field(PropertyOrderBy.ID, alias="orderBy")
    order: SortOrder = SortOrder.ASC

    @field_validator("skip", "take", "bedrooms", "bathrooms", mode="before")
    @classmethod
    def counts_are_integers(cls, value):
        return check_integer(value)

    @field_validator("price_min", "price_max", mode="before")
    @classmethod
    def prices_are_numbers(cls, value):
        return check_number(value)

    @field_validator("order", mode="before")
    @classmethod
    def normalize_order(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


class PaginationResponse(BaseModel):
    skip: int
    take: int
    count: int


class PropertiesResponse(BaseModel):
    properties: List[PropertyResponse]
    pagination: PaginationResponse
