"""
Common utility functions for API responses
"""
from rest_framework.response import Response
from rest_framework import status

from .exceptions import InvalidRequest


def success_response(data=None, message="Success", status_code=status.HTTP_200_OK):
    """
    Standard success response format
    """
    response_data = {
        "code": status_code,
        "msg": message,
        "data": data
    }
    return Response(response_data, status=status_code)


def error_response(message="Error", errors=None, status_code=status.HTTP_400_BAD_REQUEST,
                   kind=InvalidRequest.kind):
    """
    Standard error response format; ``kind`` matches the domain error taxonomy
    """
    response_data = {
        "code": status_code,
        "kind": kind,
        "msg": message
    }
    if errors:
        response_data["errors"] = errors
    return Response(response_data, status=status_code)
