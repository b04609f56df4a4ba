"""
Error handling middleware for API requests
"""
import logging

from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Turns unhandled exceptions on API paths into a generic JSON error
    without exposing internal details
    """

    def process_exception(self, request, exception):
        logger.error(f"Exception in {request.path}: {str(exception)}", exc_info=True)

        if request.path.startswith('/api/'):
            return JsonResponse({
                'code': 500,
                'msg': 'Internal server error, please try again later',
                'data': None
            }, status=500)

        return None  # Let Django handle non-API errors normally
