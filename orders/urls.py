from django.urls import path
from . import views


urlpatterns = [
    # Order Tables
    path('order-tables/', views.OrderTableListCreateView.as_view(), name='order-table-list-create'),
    path('order-tables/<uuid:pk>/sit/', views.sit_order_table, name='order-table-sit'),
    path('order-tables/<uuid:pk>/clear/', views.clear_order_table, name='order-table-clear'),
    path('order-tables/<uuid:pk>/number-of-guests/', views.change_number_of_guests, name='order-table-number-of-guests'),

    # Orders
    path('orders/', views.OrderListCreateView.as_view(), name='order-list-create'),
    path('orders/<uuid:pk>/accept/', views.accept_order, name='order-accept'),
    path('orders/<uuid:pk>/serve/', views.serve_order, name='order-serve'),
    path('orders/<uuid:pk>/start-delivery/', views.start_delivery, name='order-start-delivery'),
    path('orders/<uuid:pk>/complete-delivery/', views.complete_delivery, name='order-complete-delivery'),
    path('orders/<uuid:pk>/complete/', views.complete_order, name='order-complete'),
]
