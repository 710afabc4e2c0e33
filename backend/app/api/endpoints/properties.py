from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from app.api.validation import list_params
from app.core.database import get_db
from app.core.errors import PropertyError
from app.schemas.property import (
    INT_MAX, INT_MIN, PropertyCreate, PropertyUpdate, PropertyResponse, PropertyListParams, PropertiesResponse
)
from app.services.property_service import PropertyService

router = APIRouter(prefix="/properties", tags=["Properties"])


def get_property_service(db: Session = Depends(get_db)) -> PropertyService:
    return PropertyService(db)


@router.get("", response_model=PropertiesResponse)
def list_properties(
    params: PropertyListParams = Depends(list_params),
    service: PropertyService = Depends(get_property_service)
):
    """List properties with filtering, sorting and skip/take pagination"""
    return service.get_all(params)


@router.get("/{id}", response_model=PropertyResponse)
def get_property(
    id: int = Path(..., ge=INT_MIN, le=INT_MAX),
    service: PropertyService = Depends(get_property_service)
):
    return service.get_by_id(id)


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
def create_property(
    prop_data: PropertyCreate,
    service: PropertyService = Depends(get_property_service)
):
    return service.create(prop_data)


@router.put("/{id}", response_model=PropertyResponse)
def update_property(
    prop_data: PropertyUpdate,
    id: int = Path(..., ge=INT_MIN, le=INT_MAX),
    service: PropertyService = Depends(get_property_service)
):
    """Replace all fields of a property"""
    updated = service.update(id, prop_data)
    if updated is False:
        raise PropertyError("Property could not be updated")
    return updated


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property(
    id: int = Path(..., ge=INT_MIN, le=INT_MAX),
    service: PropertyService = Depends(get_property_service)
):
    if not service.delete(id):
        raise PropertyError("Property could not be deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
