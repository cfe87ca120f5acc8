from decimal import Decimal

import pytest

from catalog.models import Menu, MenuGroup, MenuProduct, Product
from orders.models import OrderTable

from .fakes import FakeDeliveryDispatcher


@pytest.fixture(autouse=True)
def fake_external_services(settings):
    settings.KITCHENPOS_PROFANITY_CHECKER = 'tests.fakes.FakeProfanityChecker'
    settings.KITCHENPOS_DELIVERY_DISPATCHER = 'tests.fakes.FakeDeliveryDispatcher'
    FakeDeliveryDispatcher.reset()
    yield
    FakeDeliveryDispatcher.reset()


@pytest.fixture
def dispatcher():
    return FakeDeliveryDispatcher


@pytest.fixture
def menu_group(db):
    return MenuGroup.objects.create(name='Two chickens')


@pytest.fixture
def product(db):
    return Product.objects.create(name='Fried chicken', price=Decimal('16000'))


@pytest.fixture
def make_menu(db, menu_group, product):
    def _make_menu(price=Decimal('19000'), quantity=2, displayed=True, name='Fried + fried'):
        menu = Menu.objects.create(name=name, price=price, menu_group=menu_group, displayed=displayed)
        MenuProduct.objects.create(menu=menu, product=product, quantity=quantity)
        return menu
    return _make_menu


@pytest.fixture
def menu(make_menu):
    return make_menu()


@pytest.fixture
def occupied_table(db):
    return OrderTable.objects.create(name='Table 1', number_of_guests=4, empty=False)


@pytest.fixture
def empty_table(db):
    return OrderTable.objects.create(name='Table 2')
