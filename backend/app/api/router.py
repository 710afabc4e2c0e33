from fastapi import APIRouter
from app.api.endpoints import properties

api_router = APIRouter()

api_router.include_router(properties.router)
