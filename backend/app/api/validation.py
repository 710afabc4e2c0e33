"""
Request validation for the property endpoints.

Path and body parameters are validated by FastAPI through the pydantic schemas;
list query parameters are parsed explicitly by ``parse_list_params`` so the
camelCase names (``priceMin``, ``orderBy``) and the shared pagination bounds
apply in one place. Both paths report failures in the same shape.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional

from fastapi import Request
from pydantic import ValidationError

from app.core.errors import PropertyValidationError
from app.schemas.property import PropertyListParams


def format_validation_errors(errors: Iterable[Dict[str, Any]], location: Optional[str] = None) -> List[Dict[str, Any]]:
    """Flatten pydantic error dicts into ``{field, location, message}`` entries."""
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if location is None and loc and loc[0] in ("path", "query", "body", "header", "cookie"):
            error_location, field_parts = loc[0], loc[1:]
        else:
            error_location, field_parts = location or "body", loc
        formatted.append({
            "field": ".".join(field_parts) or error_location,
            "location": error_location,
            "message": error.get("msg", "Invalid value"),
        })
    return formatted


def parse_list_params(query_params: Mapping[str, str]) -> PropertyListParams:
    """Coerce raw query parameters into typed list parameters.

    Raises PropertyValidationError listing every invalid parameter.
    """
    try:
        return PropertyListParams.model_validate(dict(query_params))
    except ValidationError as e:
        raise PropertyValidationError(format_validation_errors(e.errors(), location="query"))


def list_params(request: Request) -> PropertyListParams:
    """FastAPI dependency wrapping parse_list_params."""
    return parse_list_params(request.query_params)
