import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Resource already exists.'
    default_code = 'conflict'


class InvalidArgument(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid argument.'
    default_code = 'invalid'


def _flatten_errors(detail, prefix=''):
    """
    Turns a nested ValidationError detail into a flat list of
    {'field': ..., 'message': ...} entries.
    """
    if isinstance(detail, dict):
        errors = []
        for key, value in detail.items():
            field = key if not prefix else f'{prefix}.{key}'
            if key == 'non_field_errors':
                field = prefix or 'body'
            errors.extend(_flatten_errors(value, field))
        return errors
    if isinstance(detail, list):
        errors = []
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                errors.extend(_flatten_errors(value, f'{prefix}[{index}]'))
            else:
                errors.extend(_flatten_errors(value, prefix))
        return errors
    return [{'field': prefix or 'body', 'message': str(detail)}]


def bookstore_exception_handler(exc, context):
    """
    Renders every failure as {'success': False, 'error': <message>}.

    - Validation errors become a 400 with 'details' and 'errors' listing the
      field level messages.
    - Other API exceptions keep their status and message.
    - Anything else is logged with its traceback and masked as a 500.
    """
    response = drf_exception_handler(exc, context)
    view = context.get('view')
    request = context.get('request')
    where = f'{request.method} {request.path}' if request is not None else repr(view)

    if response is None:
        logger.error('Unhandled error on %s: %s', where, exc, exc_info=exc)
        return Response(
            {'success': False, 'error': 'Internal Server Error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        errors = _flatten_errors(exc.detail)
        response.data = {
            'success': False,
            'error': 'Validation Error',
            'details': '; '.join(f"{e['field']}: {e['message']}" for e in errors),
            'errors': errors,
        }
    else:
        detail = exc.detail if isinstance(exc, APIException) else response.data
        if isinstance(detail, dict):
            detail = detail.get('detail', detail)
        response.data = {'success': False, 'error': str(detail)}

    logger.warning('%s failed with %s: %s', where, response.status_code, response.data['error'])
    return response
