"""
Error kinds raised by the stores and services, plus the DRF exception
handler that renders them for the JSON endpoints.

``NotFound`` and ``ValidationError`` are DRF's own classes; ``Conflict``
covers duplicate usernames and role names.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

__all__ = ['Conflict', 'NotFound', 'ValidationError', 'api_exception_handler']


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'resource already exists'
    default_code = 'conflict'


def _error_code(exc) -> str:
    code = getattr(exc, 'default_code', None)
    if isinstance(exc, ValidationError):
        return 'validation_error'
    return code or 'api_error'


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception('Unhandled error in %s', context.get('view'))
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    if isinstance(resp.data, dict) and set(resp.data) == {'detail'}:
        detail = resp.data['detail']
    else:
        detail = resp.data
    return Response({'ok': False, 'error': {'code': _error_code(exc), 'message': detail}}, status=resp.status_code)
