"""
URL configuration for core project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.urls import path
from eldlog.views import logbook_page, logbook_trace, render_logbook

from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

urlpatterns = [
    # --- Logbook rendering ---
    path("api/logbook", render_logbook, name="logbook"),
    path("api/logbook/trace", logbook_trace, name="logbook_trace"),
    path("api/logbook/page", logbook_page, name="logbook_page"),

    # Friendly aliases: trailing slashes
    path("api/logbook/", render_logbook, name="logbook_slash"),
    path("api/logbook/trace/", logbook_trace, name="logbook_trace_slash"),
    path("api/logbook/page/", logbook_page, name="logbook_page_slash"),

    # --- OpenAPI / Swagger ---
    path("api/schema/", SpectacularAPIView.as_view(api_version="1.0.0"), name="schema"),
    path("api/schema/swagger/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/schema/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]
