"""
Catalog services: products, menu groups and the menu price rules
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from common.exceptions import InvalidMenu, NotFound, PriceExceedsValue
from common.profanity import get_profanity_checker
from common.validators import require_displayable, require_name, require_non_negative, require_quantity

from .models import Menu, MenuGroup, MenuProduct, Product
from .repositories import MenuGroupRepository, MenuRepository, ProductRepository

logger = logging.getLogger(__name__)


@dataclass
class ProductRequest:
    name: Optional[str] = None
    price: Optional[Decimal] = None


@dataclass
class MenuGroupRequest:
    name: Optional[str] = None


@dataclass
class MenuProductRequest:
    product_id: Optional[UUID] = None
    quantity: Optional[int] = None


@dataclass
class MenuRequest:
    name: Optional[str] = None
    price: Optional[Decimal] = None
    menu_group_id: Optional[UUID] = None
    menu_products: List[MenuProductRequest] = field(default_factory=list)
    displayed: bool = False


class ProductService:
    def __init__(self, product_repository=None, menu_repository=None, profanity_checker=None):
        self.product_repository = product_repository or ProductRepository()
        self.menu_repository = menu_repository or MenuRepository()
        self.profanity_checker = profanity_checker or get_profanity_checker()

    @transaction.atomic
    def create(self, request):
        price = require_non_negative(request.price)
        name = require_displayable(request.name, self.profanity_checker)

        product = self.product_repository.save(Product(name=name, price=price))
        logger.info(f"Product created | id={product.id}, price={product.price}")
        return product

    @transaction.atomic
    def change_price(self, product_id, price):
        """Reprice a product and hide every menu the new price makes too expensive"""
        price = require_non_negative(price)
        product = self.product_repository.find_by_id(product_id)
        if product is None:
            raise NotFound(f"Product not found: {product_id}")

        product.price = price
        self.product_repository.save(product)

        for menu in self.menu_repository.find_all_by_product_id(product.id):
            if menu.price > menu.products_total():
                menu.displayed = False
                self.menu_repository.save(menu)
                logger.info(f"Menu hidden after product price change | menu={menu.id}, product={product.id}")

        return product

    def find_all(self):
        return self.product_repository.find_all()


class MenuGroupService:
    def __init__(self, menu_group_repository=None):
        self.menu_group_repository = menu_group_repository or MenuGroupRepository()

    @transaction.atomic
    def create(self, request):
        name = require_name(request.name)
        return self.menu_group_repository.save(MenuGroup(name=name))

    def find_all(self):
        return self.menu_group_repository.find_all()


class MenuService:
    """
    Keeps every menu priced at or below the value of its products.

    The rule is checked on create, on price change and again on display,
    because product prices can move after a menu was created.
    """

    def __init__(self, menu_repository=None, menu_group_repository=None,
                 product_repository=None, profanity_checker=None):
        self.menu_repository = menu_repository or MenuRepository()
        self.menu_group_repository = menu_group_repository or MenuGroupRepository()
        self.product_repository = product_repository or ProductRepository()
        self.profanity_checker = profanity_checker or get_profanity_checker()

    @transaction.atomic
    def create(self, request):
        price = require_non_negative(request.price)

        menu_group = self.menu_group_repository.find_by_id(request.menu_group_id)
        if menu_group is None:
            raise NotFound(f"Menu group not found: {request.menu_group_id}")

        menu_product_requests = request.menu_products
        if not menu_product_requests:
            raise InvalidMenu("Menu must contain at least one product")

        menu_products = self._resolve_menu_products(menu_product_requests)
        for menu_product in menu_products:
            require_quantity(menu_product.quantity)

        name = require_displayable(request.name, self.profanity_checker)

        menu = Menu(name=name, price=price, menu_group=menu_group, displayed=bool(request.displayed))
        self._require_price_within_value(price, menu.products_total(menu_products))

        menu = self.menu_repository.save(menu, menu_products)
        logger.info(f"Menu created | id={menu.id}, price={menu.price}, products={len(menu_products)}")
        return menu

    @transaction.atomic
    def change_price(self, menu_id, price):
        menu = self._get_menu(menu_id)
        price = require_non_negative(price)
        self._require_price_within_value(price, menu.products_total())

        menu.price = price
        self.menu_repository.save(menu)
        logger.info(f"Menu price changed | id={menu.id}, price={menu.price}")
        return menu

    @transaction.atomic
    def display(self, menu_id):
        menu = self._get_menu(menu_id)
        # product prices may have changed since the menu was priced
        self._require_price_within_value(menu.price, menu.products_total())

        menu.displayed = True
        self.menu_repository.save(menu)
        logger.info(f"Menu displayed | id={menu.id}")
        return menu

    @transaction.atomic
    def hide(self, menu_id):
        menu = self._get_menu(menu_id)
        menu.displayed = False
        self.menu_repository.save(menu)
        logger.info(f"Menu hidden | id={menu.id}")
        return menu

    def find_all(self):
        return self.menu_repository.find_all()

    def _get_menu(self, menu_id):
        menu = self.menu_repository.find_by_id(menu_id)
        if menu is None:
            raise NotFound(f"Menu not found: {menu_id}")
        return menu

    def _resolve_menu_products(self, menu_product_requests):
        product_ids = {menu_product_request.product_id for menu_product_request in menu_product_requests}
        products = self.product_repository.find_all_by_id(product_ids)
        if len(products) != len(product_ids):
            raise NotFound("Some menu products do not exist")

        # Re-resolve each line so a product removed between the two reads is still reported
        menu_products = []
        for menu_product_request in menu_product_requests:
            product = self.product_repository.find_by_id(menu_product_request.product_id)
            if product is None:
                raise NotFound(f"Product not found: {menu_product_request.product_id}")
            menu_products.append(MenuProduct(product=product, quantity=menu_product_request.quantity))
        return menu_products

    @staticmethod
    def _require_price_within_value(price, products_total):
        if price > products_total:
            raise PriceExceedsValue(
                f"Menu price {price} exceeds the sum of its products {products_total}"
            )
