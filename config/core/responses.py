from rest_framework import status
from rest_framework.response import Response


def envelope(data=None, message=None, status_code=status.HTTP_200_OK):
    """
    Wraps a payload in the standard {'success': True, 'data', 'message'} body.
    Keys with no value are left out.
    """
    body = {'success': True}
    if data is not None:
        body['data'] = data
    if message:
        body['message'] = message
    return Response(body, status=status_code)


def paginated_envelope(data, pagination):
    """List responses additionally carry the page metadata."""
    return Response({'success': True, 'data': data, 'pagination': pagination}, status=status.HTTP_200_OK)
