import uuid

import pytest
from rest_framework.test import APIClient

from catalog.models import Menu, Product
from orders.models import Order, OrderStatus

pytestmark = pytest.mark.django_db


@pytest.fixture
def client():
    return APIClient()


def test_create_and_list_products(client):
    response = client.post('/api/products/', {'name': 'Fried chicken', 'price': '16000'}, format='json')

    assert response.status_code == 201
    assert response.data['name'] == 'Fried chicken'
    assert response.data['price'] == '16000.00'

    response = client.get('/api/products/')
    assert response.status_code == 200
    assert [p['name'] for p in response.data] == ['Fried chicken']


def test_product_errors_use_the_error_body(client):
    response = client.post('/api/products/', {'name': 'Fried chicken', 'price': '-1'}, format='json')

    assert response.status_code == 400
    assert response.data['error'] is True
    assert response.data['code'] == 'invalid_price'
    assert response.data['status_code'] == 400


def test_profane_product_name_is_rejected(client):
    response = client.post('/api/products/', {'name': 'Shit wings', 'price': '1000'}, format='json')

    assert response.status_code == 400
    assert response.data['code'] == 'invalid_name'
    assert not Product.objects.exists()


def test_change_product_price(client, product):
    response = client.put(f'/api/products/{product.id}/price/', {'price': '17000'}, format='json')

    assert response.status_code == 200
    assert response.data['price'] == '17000.00'


def test_create_menu(client, menu_group, product):
    payload = {
        'name': 'Chicken set',
        'price': '32000',
        'menu_group_id': str(menu_group.id),
        'menu_products': [{'product_id': str(product.id), 'quantity': 2}],
    }
    response = client.post('/api/menus/', payload, format='json')

    assert response.status_code == 201
    assert response.data['displayed'] is False
    assert response.data['menu_group_id'] == str(menu_group.id)
    assert response.data['menu_products'][0]['quantity'] == 2


def test_create_menu_above_value(client, menu_group, product):
    payload = {
        'name': 'Chicken set',
        'price': '32001',
        'menu_group_id': str(menu_group.id),
        'menu_products': [{'product_id': str(product.id), 'quantity': 2}],
    }
    response = client.post('/api/menus/', payload, format='json')

    assert response.status_code == 400
    assert response.data['code'] == 'price_exceeds_value'
    assert not Menu.objects.exists()


def test_display_and_hide_menu(client, make_menu):
    menu = make_menu(displayed=False)

    assert client.put(f'/api/menus/{menu.id}/display/').data['displayed'] is True
    assert client.put(f'/api/menus/{menu.id}/hide/').data['displayed'] is False


def test_unknown_menu_is_404(client):
    response = client.put(f'/api/menus/{uuid.uuid4()}/display/')

    assert response.status_code == 404
    assert response.data['code'] == 'not_found'


def test_filter_displayed_menus(client, make_menu):
    make_menu(displayed=True, name='shown')
    make_menu(displayed=False, name='hidden')

    response = client.get('/api/menus/', {'displayed': 'true'})
    assert [m['name'] for m in response.data] == ['shown']


def test_eat_in_order_over_http(client, menu):
    response = client.post('/api/order-tables/', {'name': 'Table 7'}, format='json')
    assert response.status_code == 201
    table_id = response.data['id']
    assert response.data['empty'] is True

    assert client.put(f'/api/order-tables/{table_id}/sit/').data['empty'] is False
    response = client.put(f'/api/order-tables/{table_id}/number-of-guests/', {'number_of_guests': 3}, format='json')
    assert response.data['number_of_guests'] == 3

    payload = {
        'type': 'EAT_IN',
        'order_table_id': table_id,
        'order_line_items': [{'menu_id': str(menu.id), 'quantity': 2, 'price': '19000'}],
    }
    response = client.post('/api/orders/', payload, format='json')
    assert response.status_code == 201
    assert response.data['status'] == OrderStatus.WAITING
    assert response.data['total_price'] == '38000.00'
    order_id = response.data['id']

    response = client.put(f'/api/order-tables/{table_id}/clear/')
    assert response.status_code == 409
    assert response.data['code'] == 'open_orders_exist'

    for step in ('accept', 'serve', 'complete'):
        response = client.put(f'/api/orders/{order_id}/{step}/')
        assert response.status_code == 200

    assert response.data['status'] == OrderStatus.COMPLETED
    assert response.data['table_details']['empty'] is True


def test_illegal_transition_is_409(client, menu):
    payload = {
        'type': 'TAKEOUT',
        'order_line_items': [{'menu_id': str(menu.id), 'quantity': 1, 'price': '19000'}],
    }
    order_id = client.post('/api/orders/', payload, format='json').data['id']

    response = client.put(f'/api/orders/{order_id}/serve/')

    assert response.status_code == 409
    assert response.data['code'] == 'illegal_status'
    assert Order.objects.get(pk=order_id).status == OrderStatus.WAITING


def test_price_mismatch_over_http(client, menu):
    payload = {
        'type': 'TAKEOUT',
        'order_line_items': [{'menu_id': str(menu.id), 'quantity': 1, 'price': '1000'}],
    }
    response = client.post('/api/orders/', payload, format='json')

    assert response.status_code == 400
    assert response.data['code'] == 'price_mismatch'


def test_delivery_accept_dispatches_after_commit(client, menu, dispatcher, django_capture_on_commit_callbacks):
    payload = {
        'type': 'DELIVERY',
        'delivery_address': 'Seoul, Songpa-gu 1',
        'order_line_items': [{'menu_id': str(menu.id), 'quantity': 1, 'price': '19000'}],
    }
    order_id = client.post('/api/orders/', payload, format='json').data['id']

    with django_capture_on_commit_callbacks(execute=True):
        response = client.put(f'/api/orders/{order_id}/accept/')

    assert response.status_code == 200
    assert [str(order) for order, _, _ in dispatcher.requests] == [order_id]


def test_unknown_order_type_is_an_invalid_order(client, menu):
    payload = {
        'type': 'DRIVE_THRU',
        'order_line_items': [{'menu_id': str(menu.id), 'quantity': 1, 'price': '19000'}],
    }
    response = client.post('/api/orders/', payload, format='json')

    assert response.status_code == 400
    assert response.data['code'] == 'invalid_order'
    assert not Order.objects.exists()


def test_malformed_payload_is_a_validation_error(client):
    response = client.post('/api/orders/', {'type': 'TAKEOUT', 'order_table_id': 'not-a-uuid'}, format='json')

    assert response.status_code == 400
    assert response.data['message'] == 'Validation error'
