"""
Domain error taxonomy and the DRF exception handler that maps it to HTTP.

Services raise ShopError subclasses. Each carries a stable ``kind``, a
human-readable message and optional diagnostic ``details``. Only
``custom_exception_handler`` knows about status codes.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ShopError(Exception):
    """Base class for every business-rule failure"""

    kind = 'ShopError'
    default_message = 'Request could not be processed'

    def __init__(self, message=None, **details):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self):
        data = {'kind': self.kind, 'msg': self.message}
        if self.details:
            data['errors'] = self.details
        return data


class EmptyCart(ShopError):
    kind = 'EmptyCart'
    default_message = 'Cart is empty'


class OutOfStock(ShopError):
    kind = 'OutOfStock'
    default_message = 'Not enough stock'

    def __init__(self, product_id, requested, available, product_name=''):
        label = product_name or f'product {product_id}'
        super().__init__(
            f'Not enough stock for {label}: requested {requested}, available {available}',
            product_id=product_id,
            requested=requested,
            available=available,
        )


class InvalidShippingInfo(ShopError):
    kind = 'InvalidShippingInfo'
    default_message = 'Shipping name, address and phone are required'


class InvalidOrExpiredPromotion(ShopError):
    kind = 'InvalidOrExpiredPromotion'
    default_message = 'Invalid or expired code'


class MinimumOrderNotMet(ShopError):
    kind = 'MinimumOrderNotMet'
    default_message = 'Order value too low for this promotion'


class InsufficientPoints(ShopError):
    kind = 'InsufficientPoints'
    default_message = 'Not enough points'


class Forbidden(ShopError):
    kind = 'Forbidden'
    default_message = 'You do not own this resource'


class CancellationWindowClosed(ShopError):
    kind = 'CancellationWindowClosed'
    default_message = 'Cannot cancel order at this stage'

    def __init__(self, current_status, elapsed_minutes):
        super().__init__(
            f'Cannot cancel order in status {current_status} '
            f'after {elapsed_minutes:.1f} minutes',
            status=current_status,
            elapsed_minutes=round(elapsed_minutes, 1),
        )


class OrderAlreadyTerminal(ShopError):
    kind = 'OrderAlreadyTerminal'
    default_message = 'Order is already delivered or canceled'


class InvalidStatus(ShopError):
    kind = 'InvalidStatus'
    default_message = 'Invalid status'


class NotFound(ShopError):
    kind = 'NotFound'
    default_message = 'Resource not found'


class AlreadyReviewed(ShopError):
    kind = 'AlreadyReviewed'
    default_message = 'You already reviewed this product'


class ReviewNotAllowed(ShopError):
    kind = 'ReviewNotAllowed'
    default_message = 'You can only review purchased products'


class ResourceInUse(ShopError):
    kind = 'ResourceInUse'
    default_message = 'Resource is referenced by orders'


class InvalidRequest(ShopError):
    kind = 'InvalidRequest'
    default_message = 'Request data is invalid'


STATUS_BY_KIND = {
    InvalidRequest.kind: status.HTTP_400_BAD_REQUEST,
    EmptyCart.kind: status.HTTP_400_BAD_REQUEST,
    InvalidShippingInfo.kind: status.HTTP_400_BAD_REQUEST,
    InvalidOrExpiredPromotion.kind: status.HTTP_400_BAD_REQUEST,
    MinimumOrderNotMet.kind: status.HTTP_400_BAD_REQUEST,
    InsufficientPoints.kind: status.HTTP_400_BAD_REQUEST,
    InvalidStatus.kind: status.HTTP_400_BAD_REQUEST,
    Forbidden.kind: status.HTTP_403_FORBIDDEN,
    ReviewNotAllowed.kind: status.HTTP_403_FORBIDDEN,
    NotFound.kind: status.HTTP_404_NOT_FOUND,
    OutOfStock.kind: status.HTTP_409_CONFLICT,
    CancellationWindowClosed.kind: status.HTTP_409_CONFLICT,
    OrderAlreadyTerminal.kind: status.HTTP_409_CONFLICT,
    AlreadyReviewed.kind: status.HTTP_409_CONFLICT,
    ResourceInUse.kind: status.HTTP_409_CONFLICT,
}


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    if isinstance(exc, ShopError):
        status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST)
        logger.warning(f"{exc.kind}: {exc.message}")
        return Response({'code': status_code, **exc.to_dict()}, status=status_code)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        logger.error(f"API Exception: {exc}")

        custom_response_data = {
            'code': response.status_code,
            'kind': exc.__class__.__name__,
            'msg': 'An error occurred',
            'errors': response.data
        }

        # Handle specific error types
        if response.status_code == status.HTTP_400_BAD_REQUEST:
            custom_response_data['msg'] = 'Validation error'
        elif response.status_code == status.HTTP_401_UNAUTHORIZED:
            custom_response_data['msg'] = 'Authentication required'
        elif response.status_code == status.HTTP_403_FORBIDDEN:
            custom_response_data['msg'] = 'Permission denied'
        elif response.status_code == status.HTTP_404_NOT_FOUND:
            custom_response_data['msg'] = 'Resource not found'
        elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            custom_response_data['msg'] = 'Method not allowed'

        response.data = custom_response_data

    return response
