"""
Unified API error responses.

Every DRF view routes its failures through :func:`api_exception_handler`
so that clients only ever see one of a few error shapes:

* validation errors: ``400 {"error": "Validation failed", "details": {field: message}}``
* unparseable bodies: ``400 {"error": "Malformed JSON request"}``
* missing records: ``404`` with an empty body
* anything unexpected: ``500 {"error": "Internal server error"}``
"""
import logging

from rest_framework import exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback

logger = logging.getLogger(__name__)

INTERNAL_ERROR = {'error': 'Internal server error'}


def _first_message(value):
    if isinstance(value, dict):
        return {key: _first_message(v) for key, v in value.items()}
    if isinstance(value, (list, tuple)):
        return _first_message(value[0]) if value else ''
    return str(value)


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.error('Unhandled error in %s', type(context.get('view')).__name__, exc_info=exc)
        set_rollback()
        return Response(INTERNAL_ERROR, status=500)
    if isinstance(exc, exceptions.ValidationError):
        details = _first_message(exc.detail)
        if not isinstance(details, dict):
            details = {'non_field_errors': details}
        resp.data = {'error': 'Validation failed', 'details': details}
    elif isinstance(exc, exceptions.ParseError):
        resp.data = {'error': 'Malformed JSON request'}
    elif resp.status_code == 404:
        resp.data = None
    else:
        detail = resp.data.get('detail') if isinstance(resp.data, dict) else resp.data
        resp.data = {'error': detail}
    return resp
