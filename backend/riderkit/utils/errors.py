from typing import Dict
from fastapi import HTTPException, status
import logging

from ..services.rider_engine.errors import InvalidRosterError, RiderEngineError, UnknownTemplateError

logger = logging.getLogger(__name__)


def error_response(
    message: str,
    field_errors: Dict[str, str],
    code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
) -> HTTPException:
    """Return an HTTPException with a consistent structure and log details."""
    logger.error("%s %s", message, field_errors)
    detail = {"message": message, "field_errors": field_errors}
    return HTTPException(status_code=code, detail=detail)


def engine_error_response(exc: RiderEngineError) -> HTTPException:
    """Map a rider engine error onto the API's error shape."""
    if isinstance(exc, InvalidRosterError):
        return error_response(exc.message, {"roster": "empty"})
    if isinstance(exc, UnknownTemplateError):
        return error_response("Unknown template", {"template": "not_found"}, status.HTTP_404_NOT_FOUND)
    return error_response(str(exc), {}, status.HTTP_500_INTERNAL_SERVER_ERROR)
