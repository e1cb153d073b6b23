"""
URL configuration for the hospitalapp project.

The application routes live in ``core.routers``.  Because the application
owns the ``/admin/...`` prefix for its administrative patient pages, the
Django admin site is mounted at ``/django-admin/``.  OpenAPI documentation
for the JSON endpoints is exposed at ``/swagger/`` and ``/redoc/``.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

api_info = openapi.Info(
    title="Hospital Patient API",
    default_version='v1',
    description="JSON endpoints of the hospital patient management application.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('django-admin/', admin.site.urls),
    path('', include('core.routers')),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]
