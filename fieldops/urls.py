"""
URL configuration for the fieldops project.

Only the Django admin is routed here; list/detail endpoints live in the
request-handling layer that consumes ``access.filters`` and ``access.metrics``.
"""
# fieldops/urls.py
from django.contrib import admin
from django.urls import path

urlpatterns = [
    path("admin/", admin.site.urls),
]
