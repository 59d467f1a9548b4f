from django.conf import settings
from django.urls import include, path, re_path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from apps.common.views import api_root, health, live_health, ready_health

urlpatterns = [
    path("", api_root, name="api-root"),
    path("api/", include("apps.api.urls")),
    re_path(r"^health/?$", health, name="health"),
    path("health/live", live_health, name="health-live"),
    path("health/ready", ready_health, name="health-ready"),
]

# Interactive schema docs only in DEBUG; the API itself is always served.
if settings.DEBUG:
    urlpatterns += [
        path("schema/", SpectacularAPIView.as_view(), name="schema"),
        path(
            "docs/swagger/",
            SpectacularSwaggerView.as_view(url_name="schema"),
            name="swagger-ui",
        ),
        path(
            "docs/redoc/",
            SpectacularRedocView.as_view(url_name="schema"),
            name="redoc",
        ),
    ]

handler404 = "apps.common.views.not_found"
handler500 = "apps.common.views.server_error"
