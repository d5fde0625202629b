"""
Success response envelope.
"""
from rest_framework import status as http_status
from rest_framework.response import Response


def success_response(message: str, data=None, status: int = http_status.HTTP_200_OK) -> Response:
    """{'status', 'message', 'data'} envelope used by the self-service API."""
    body = {'status': status, 'message': message}
    if data is not None:
        body['data'] = data
    return Response(body, status=status)
