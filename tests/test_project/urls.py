"""Test project URL configuration."""

from django.urls import include, path

from email_preferences.preferences.urls import urlpatterns as preferences_urls

urlpatterns = [
    path("", include(preferences_urls)),
]
