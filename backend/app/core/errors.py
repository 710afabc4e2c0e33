from typing import Any, Dict, List


class PropertyError(Exception):
    """Base error for the property API; carries the HTTP status to respond with."""

    def __init__(self, message: str = "Internal server error", status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PropertyNotFoundError(PropertyError):
    def __init__(self):
        super().__init__("Property not found", 404)


class PropertyValidationError(PropertyError):
    """Raised when request parameters fail validation.

    ``errors`` holds one entry per violated field:
    ``{"field": ..., "location": ..., "message": ...}``.
    """

    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__("Validation failed", 400)
        self.errors = errors
