from app.services.property_service import PropertyService, build_property_filters

__all__ = ["PropertyService", "build_property_filters"]
