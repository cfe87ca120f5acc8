from decimal import Decimal

import pytest

from catalog.models import Menu, Product
from catalog.services import ProductRequest, ProductService
from common.exceptions import InvalidName, InvalidPrice, NotFound

pytestmark = pytest.mark.django_db


def test_create_product():
    product = ProductService().create(ProductRequest(name='Fried chicken', price=Decimal('16000')))

    saved = Product.objects.get(pk=product.id)
    assert saved.name == 'Fried chicken'
    assert saved.price == Decimal('16000')


def test_create_free_product():
    product = ProductService().create(ProductRequest(name='Pickled radish', price=Decimal('0')))
    assert product.price == Decimal('0')


@pytest.mark.parametrize('price', [None, Decimal('-1000'), Decimal('NaN'), Decimal('Infinity')])
def test_create_rejects_bad_price(price):
    with pytest.raises(InvalidPrice):
        ProductService().create(ProductRequest(name='Fried chicken', price=price))
    assert not Product.objects.exists()


@pytest.mark.parametrize('name', [None, '', 'Shit chicken'])
def test_create_rejects_bad_name(name):
    with pytest.raises(InvalidName):
        ProductService().create(ProductRequest(name=name, price=Decimal('16000')))


def test_change_price(product):
    changed = ProductService().change_price(product.id, Decimal('15000'))

    assert changed.price == Decimal('15000')
    product.refresh_from_db()
    assert product.price == Decimal('15000')


def test_change_price_rejects_negative(product):
    with pytest.raises(InvalidPrice):
        ProductService().change_price(product.id, Decimal('-1'))
    product.refresh_from_db()
    assert product.price == Decimal('16000')


def test_change_price_of_unknown_product():
    with pytest.raises(NotFound):
        ProductService().change_price('00000000-0000-0000-0000-000000000000', Decimal('1000'))


def test_price_drop_hides_menus_priced_above_their_value(make_menu, product):
    # 2 x 16000 = 32000 worth of product
    cheap_menu = make_menu(price=Decimal('19000'), name='cheap')
    dear_menu = make_menu(price=Decimal('30000'), name='dear')

    ProductService().change_price(product.id, Decimal('10000'))

    assert Menu.objects.get(pk=cheap_menu.id).displayed is True
    assert Menu.objects.get(pk=dear_menu.id).displayed is False


def test_find_all(product):
    assert [p.id for p in ProductService().find_all()] == [product.id]
