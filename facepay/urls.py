from django.conf import settings
from django.urls import path, include, re_path
from django.http import JsonResponse
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView
from rest_framework.permissions import AllowAny

from .settings.base import API_PREFIX, HEALTH_INFO

def health_view(_request):
    return JsonResponse({"status": "ok", **HEALTH_INFO(), "env": "dev" if settings.DEBUG else "prod"})

urlpatterns = [
    path("health/", health_view, name="health"),

    # OpenAPI
    path(f"{API_PREFIX}/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        f"{API_PREFIX}/docs/",
        SpectacularSwaggerView.as_view(
            url_name="schema",
            permission_classes=[AllowAny],
            authentication_classes=[],
        ),
        name="swagger-ui",
    ),
    path(
        f"{API_PREFIX}/redoc/",
        SpectacularRedocView.as_view(
            url_name="schema",
            permission_classes=[AllowAny],
            authentication_classes=[],
        ),
        name="redoc",
    ),

    path(f"{API_PREFIX}/face-auth/", include("faceauth.urls.session_urls")),
    path(f"{API_PREFIX}/payments", include("payments.urls.payment_urls")),
]


urlpatterns += [
    re_path(
        r"^$",
        SpectacularSwaggerView.as_view(
            url_name="schema",
            permission_classes=[AllowAny],
            authentication_classes=[],
        ),
    ),
]
