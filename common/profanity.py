"""
PurgoMalum profanity filter client
"""
import asyncio
import logging

import aiohttp
from asgiref.sync import async_to_sync
from django.conf import settings
from django.utils.module_loading import import_string

from .exceptions import ProfanityCheckError

logger = logging.getLogger(__name__)


class PurgomalumClient:
    """Asks the PurgoMalum text service whether a name contains profanity"""

    def __init__(self, url=None, timeout=None):
        self.url = url or settings.KITCHENPOS_PROFANITY_URL
        self.timeout = timeout or settings.KITCHENPOS_PROFANITY_TIMEOUT

    def contains_profanity(self, text):
        return async_to_sync(self._contains_profanity)(text)

    async def _contains_profanity(self, text):
        client_timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=client_timeout) as session:
                async with session.get(self.url, params={'text': text}) as response:
                    response.raise_for_status()
                    body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Profanity check failed | url={self.url}, error={e}")
            raise ProfanityCheckError(f"Profanity check failed: {e}") from e

        return body.strip().lower() == 'true'


def get_profanity_checker():
    """Instantiate the checker configured in KITCHENPOS_PROFANITY_CHECKER"""
    return import_string(settings.KITCHENPOS_PROFANITY_CHECKER)()
