"""
Kitchenriders delivery dispatch client
"""
import asyncio
import logging

import aiohttp
from asgiref.sync import async_to_sync
from django.conf import settings
from django.utils.module_loading import import_string

from common.exceptions import DeliveryDispatchError

logger = logging.getLogger(__name__)


class KitchenridersClient:
    """Asks the rider service to pick up an accepted delivery order"""

    def __init__(self, url=None, timeout=None):
        self.url = url or settings.KITCHENPOS_DELIVERY_URL
        self.timeout = timeout or settings.KITCHENPOS_DELIVERY_TIMEOUT

    def request_delivery(self, order_id, delivery_address, amount):
        async_to_sync(self._request_delivery)(order_id, delivery_address, amount)

    async def _request_delivery(self, order_id, delivery_address, amount):
        payload = {
            'order_id': str(order_id),
            'delivery_address': delivery_address,
            # decimal string keeps the amount exact on the wire
            'amount': str(amount),
        }
        client_timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=client_timeout) as session:
                async with session.post(self.url, json=payload) as response:
                    response.raise_for_status()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DeliveryDispatchError(f"Delivery request for order {order_id} failed: {e}") from e

        logger.info(f"Delivery requested | order={order_id}, amount={amount}")


def get_delivery_dispatcher():
    """Instantiate the dispatcher configured in KITCHENPOS_DELIVERY_DISPATCHER"""
    return import_string(settings.KITCHENPOS_DELIVERY_DISPATCHER)()
