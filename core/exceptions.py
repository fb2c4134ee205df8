import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger("facepay.core")

DEFAULT_ERROR_MESSAGE = "Unexpected server error"


def api_exception_handler(exc, context):
    """
    Enveloppe d'erreur unique {"message": ...}:
    - exceptions DRF (validation, parse, ...) -> leur status, détail dans "errors"
    - toute autre exception -> 500, message de l'erreur (ou message générique)
    """
    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, ValidationError):
            response.data = {"message": "Invalid request payload", "errors": response.data}
        else:
            detail = response.data.get("detail") if isinstance(response.data, dict) else None
            response.data = {"message": str(detail or exc)}
        return response

    view = context.get("view")
    logger.exception("Unhandled error in %s", view.__class__.__name__ if view else "request")
    return Response({"message": str(exc) or DEFAULT_ERROR_MESSAGE},
                    status=status.HTTP_500_INTERNAL_SERVER_ERROR)
