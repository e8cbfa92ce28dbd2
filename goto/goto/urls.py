"""
URL configuration for goto project.

- /                 API index
- /api/support/     issues and comments
- /api/schema/      OpenAPI schema, /api/docs/ Swagger UI
"""
# goto/urls.py
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from support.views.page import index

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/support/", include("support.urls")),

    # OpenAPI
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    path("", index, name="index"),
]
