from django.urls import path, register_converter

from . import views
from .converters import RecordIdConverter
from .model_types import RESTFUL_ROUTE_KEYS


app_name = "console"

register_converter(RecordIdConverter, "record_id")


# Resource routes for provider families (list + detail).
urlpatterns = []
for _key in RESTFUL_ROUTE_KEYS.values():
    urlpatterns += [
        path(f"{_key}", views.resource_probe, {"controller": _key}, name=f"{_key}-list"),
        path(f"{_key}/<record_id:pk>", views.resource_probe, {"controller": _key}, name=f"{_key}-detail"),
    ]

# Classic controller/action[/id] routes; keep last, they match almost anything.
urlpatterns += [
    path("<path:controller>/<str:action>/<str:id>", views.route_probe, name="legacy-action-id"),
    path("<path:controller>/<str:action>", views.route_probe, name="legacy-action"),
]
