import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class PersistenceError(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "We could not save your changes right now. Please try again later."
    default_code = "persistence_error"


def api_exception_handler(exc, context):
    """DRF's handler, with storage failures answered as PersistenceError."""
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception("Storage failure in %s", type(view).__name__ if view else "request")
        exc = PersistenceError()
    return exception_handler(exc, context)
