from django.urls import path
from . import views


urlpatterns = [
    # Products
    path('products/', views.ProductListCreateView.as_view(), name='product-list-create'),
    path('products/<uuid:pk>/price/', views.change_product_price, name='product-change-price'),

    # Menu Groups
    path('menu-groups/', views.MenuGroupListCreateView.as_view(), name='menu-group-list-create'),

    # Menus
    path('menus/', views.MenuListCreateView.as_view(), name='menu-list-create'),
    path('menus/<uuid:pk>/price/', views.change_menu_price, name='menu-change-price'),
    path('menus/<uuid:pk>/display/', views.display_menu, name='menu-display'),
    path('menus/<uuid:pk>/hide/', views.hide_menu, name='menu-hide'),
]
