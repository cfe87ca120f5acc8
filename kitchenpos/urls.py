from django.urls import path, include
from drf_yasg.views import get_schema_view
from drf_yasg import openapi
from rest_framework import permissions

# Setup Swagger schema view
schema_view = get_schema_view(
    openapi.Info(
        title='API Documentation KITCHENPOS',
        default_version='v1',
        description="API for managing menus, order tables and orders",
    ),
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path("api/", include("catalog.urls")),
    path("api/", include("orders.urls")),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
]
