from common.repositories import ModelRepository

from .models import Menu, MenuGroup, MenuProduct, Product


class ProductRepository(ModelRepository):
    model = Product


class MenuGroupRepository(ModelRepository):
    model = MenuGroup


class MenuRepository(ModelRepository):
    model = Menu

    def get_queryset(self):
        return Menu.objects.select_related('menu_group').prefetch_related('menu_products__product')

    def save(self, menu, menu_products=None):
        menu.save()
        if menu_products:
            for menu_product in menu_products:
                menu_product.menu = menu
            MenuProduct.objects.bulk_create(menu_products)
        return menu

    def find_all_by_product_id(self, product_id):
        return list(self.get_queryset().filter(menu_products__product_id=product_id).distinct())
