"""
URL configuration for the medlab project.

Routes the Django admin, the lab API and the generated OpenAPI
documentation (``/swagger/`` and ``/redoc/``).  Unknown paths are answered
with the JSON error envelope instead of Django's HTML page.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="Medical Lab API",
    default_version='v1',
    description="Signup/login, bookings, blood-test results, notifications and the lab admin console.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('lab.routers')),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

handler404 = 'lab.views.health.not_found'
handler500 = 'lab.views.health.server_error'
