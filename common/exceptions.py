# exceptions.py
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError
from django.db import IntegrityError
import logging
from django.conf import settings

logger = logging.getLogger(__name__)


class KitchenPosError(Exception):
    """Base class for every rule violation raised by the POS services"""
    status_code = status.HTTP_400_BAD_REQUEST
    code = 'error'
    default_message = 'An error occurred'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidPrice(KitchenPosError):
    code = 'invalid_price'
    default_message = 'Price must be present and not negative'


class InvalidQuantity(KitchenPosError):
    code = 'invalid_quantity'
    default_message = 'Quantity must be present and not negative'


class InvalidName(KitchenPosError):
    code = 'invalid_name'
    default_message = 'Name must not be empty or contain profanity'


class InvalidOrder(KitchenPosError):
    code = 'invalid_order'
    default_message = 'Order request is invalid'


class InvalidMenu(KitchenPosError):
    code = 'invalid_menu'
    default_message = 'Menu request is invalid'


class PriceMismatch(KitchenPosError):
    code = 'price_mismatch'
    default_message = 'Order line price does not match the menu price'


class PriceExceedsValue(KitchenPosError):
    code = 'price_exceeds_value'
    default_message = 'Menu price exceeds the sum of its products'


class NotFound(KitchenPosError):
    status_code = status.HTTP_404_NOT_FOUND
    code = 'not_found'
    default_message = 'Resource not found'


class OrderTableNotFound(NotFound, InvalidOrder):
    """An eat-in order names no table, or a table that does not exist.

    Callers may catch it either as a missing resource or as an invalid order.
    """
    code = 'order_table_not_found'
    default_message = 'Eat-in order requires an existing order table'


class IllegalStatus(KitchenPosError):
    status_code = status.HTTP_409_CONFLICT
    code = 'illegal_status'
    default_message = 'Transition is not allowed from the current order status'


class IllegalTableState(KitchenPosError):
    status_code = status.HTTP_409_CONFLICT
    code = 'illegal_table_state'
    default_message = 'Order table is not in the required state'


class OpenOrdersExist(KitchenPosError):
    status_code = status.HTTP_409_CONFLICT
    code = 'open_orders_exist'
    default_message = 'Order table still has orders that are not completed'


class ProfanityCheckError(KitchenPosError):
    status_code = status.HTTP_502_BAD_GATEWAY
    code = 'profanity_check_failed'
    default_message = 'Profanity check service is unavailable'


class DeliveryDispatchError(KitchenPosError):
    status_code = status.HTTP_502_BAD_GATEWAY
    code = 'delivery_dispatch_failed'
    default_message = 'Delivery request could not be sent'


def _error_body(message, status_code, code=None, details=None):
    data = {'error': True, 'code': code, 'message': message, 'status_code': status_code}
    if details is not None:
        data['details'] = details
    return data


def _error_response(message, status_code, code=None, details=None):
    return Response(_error_body(message, status_code, code, details), status=status_code)


DRF_MESSAGES = {
    400: 'Validation error',
    404: 'Resource not found',
    405: 'Method not allowed',
}


def custom_exception_handler(exc, context):
    """
    Custom exception handler for the POS API
    """
    # Domain errors carry their own status code
    if isinstance(exc, KitchenPosError):
        return _error_response(exc.message, exc.status_code, code=exc.code)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)
    if response is not None:
        response.data = _error_body(
            DRF_MESSAGES.get(response.status_code, 'An error occurred'),
            response.status_code,
            code='invalid_request' if response.status_code == 400 else None,
            details=response.data,
        )
        return response

    # Model-level errors that slipped past the services
    if isinstance(exc, ValidationError):
        logger.error(f"Validation Error: {exc}")
        return _error_response(
            'Validation error', status.HTTP_400_BAD_REQUEST,
            code='invalid_request', details={'non_field_errors': exc.messages}
        )

    if isinstance(exc, IntegrityError):
        logger.error(f"Integrity Error: {exc}")
        return _error_response(
            'Database integrity error', status.HTTP_400_BAD_REQUEST,
            code='integrity_error', details={'error': 'This operation violates database constraints'}
        )

    logger.exception(f"Unexpected Error: {exc}")
    return _error_response(
        'An unexpected error occurred', status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={'error': str(exc)} if settings.DEBUG else {}
    )
