"""URL configuration of the preferences endpoints."""

from django.urls import path

from .views import PreferencesDataView, PreferencesSubmitView

urlpatterns = [
    path("data.json", PreferencesDataView.as_view(), name="email_preferences_data"),
    path("", PreferencesSubmitView.as_view(), name="email_preferences_submit"),
]
