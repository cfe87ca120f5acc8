from decimal import Decimal

import pytest

from common.exceptions import DeliveryDispatchError, ProfanityCheckError
from common.profanity import PurgomalumClient, get_profanity_checker
from orders.delivery import KitchenridersClient, get_delivery_dispatcher
from tests.fakes import FakeDeliveryDispatcher, FakeProfanityChecker

# nothing listens on the discard port
UNREACHABLE = 'http://127.0.0.1:9/'


def test_checkers_are_resolved_from_settings():
    assert isinstance(get_profanity_checker(), FakeProfanityChecker)
    assert isinstance(get_delivery_dispatcher(), FakeDeliveryDispatcher)


def test_clients_default_to_settings(settings):
    settings.KITCHENPOS_PROFANITY_URL = 'http://purgomalum.test/containsprofanity'
    settings.KITCHENPOS_DELIVERY_TIMEOUT = 1.5

    assert PurgomalumClient().url == 'http://purgomalum.test/containsprofanity'
    assert KitchenridersClient().timeout == 1.5


def test_unreachable_profanity_service():
    with pytest.raises(ProfanityCheckError):
        PurgomalumClient(url=UNREACHABLE, timeout=1).contains_profanity('Fried chicken')


def test_unreachable_rider_service():
    with pytest.raises(DeliveryDispatchError):
        KitchenridersClient(url=UNREACHABLE, timeout=1).request_delivery('order-1', 'Seoul', Decimal('1000'))
