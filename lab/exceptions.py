"""
API error types and the unified exception handler.

Every failure leaves the API as ``{"success": false, "message": ...}``
with the status of its error class.  Errors the handler cannot classify
are logged with their traceback and answered with a generic 500.

This module is imported by ``lab.authentication`` while DRF is still
building ``rest_framework.views``, so it must not import that module at
load time.
"""
from __future__ import annotations

import logging

from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import APIException, NotAuthenticated, ValidationError
from rest_framework.response import Response

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = 'A server error occurred'

# sqlite: "UNIQUE constraint failed"; postgres: "duplicate key value violates unique constraint"
UNIQUE_VIOLATION_MARKERS = ('unique constraint', 'duplicate key', 'duplicate entry')


class InvalidTokenError(APIException):
    """A bearer token was presented but failed verification."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Invalid or expired token'
    default_code = 'invalid_token'


class ConflictError(APIException):
    """A unique field (email, national ID, test number) is already taken."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'A record with the same unique value already exists'
    default_code = 'conflict'


def is_unique_violation(exc: IntegrityError) -> bool:
    text = str(exc).lower()
    return any(marker in text for marker in UNIQUE_VIOLATION_MARKERS)


def _first_message(data) -> str:
    if isinstance(data, list):
        return _first_message(data[0]) if data else ''
    if isinstance(data, dict):
        if 'detail' in data:
            return str(data['detail'])
        for key, value in data.items():
            msg = _first_message(value)
            if key == 'non_field_errors':
                return msg
            return f'{key}: {msg}'
        return ''
    return str(data)


def api_exception_handler(exc, context):
    from rest_framework.views import exception_handler as drf_exception_handler

    request = context.get('request')
    if isinstance(exc, IntegrityError) and is_unique_violation(exc):
        logger.warning('integrity error on %s: %s', request.path if request else '?', exc)
        exc = ConflictError()

    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.error('unhandled error in %s', type(view).__name__ if view else '?', exc_info=exc)
        return Response({'success': False, 'message': SERVER_ERROR_MESSAGE}, status=500)

    if isinstance(exc, NotAuthenticated):
        message = 'Access token required'
    else:
        message = _first_message(resp.data)

    payload = {'success': False, 'message': message}
    if isinstance(exc, ValidationError) and isinstance(resp.data, dict):
        payload['errors'] = resp.data
    resp.data = payload
    return resp
