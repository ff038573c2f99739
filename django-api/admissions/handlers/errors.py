"""Mapping of domain errors to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Domain errors keep their
code so clients can distinguish rejections without parsing messages.
Database failures become a generic 500.
"""

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from admissions.domain.errors import DomainError, ErrorCode

logger = structlog.get_logger(__name__)

STATUS_BY_CODE = {
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.GIVEAWAY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ALREADY_CHECKED_IN: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_EVENT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_GIVEAWAY: status.HTTP_409_CONFLICT,
    ErrorCode.GIVEAWAY_ALREADY_FINALIZED: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_LOCKED: status.HTTP_403_FORBIDDEN,
    ErrorCode.EVENT_AT_CAPACITY: status.HTTP_403_FORBIDDEN,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_403_FORBIDDEN,
    ErrorCode.TOKEN_REQUIRED: status.HTTP_403_FORBIDDEN,
}


def error_response(code: str, message: str, http_status: int) -> Response:
    return Response({"code": code, "error": message}, status=http_status)


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return error_response(exc.code.value, exc.message, STATUS_BY_CODE[exc.code])

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception("datastore_error", view=type(view).__name__ if view else None)
        return error_response(
            "INTERNAL", "Internal error", status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return exception_handler(exc, context)
