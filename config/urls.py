from django.contrib import admin
from django.urls import include, path

from core import views_health


urlpatterns = [
    # Health checks (safe for monitors)
    path("health/", views_health.health, name="health"),

    path("admin/", admin.site.urls),

    # Console routes; keep last, the classic controller/action routes match broadly
    path("", include("console.urls")),
]
