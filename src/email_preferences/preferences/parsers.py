"""Parsers for the preferences endpoints."""

from rest_framework.parsers import JSONParser


class PlainTextJSONParser(JSONParser):
    """Parse JSON bodies sent as `text/plain`, as browsers do for CORS simple requests."""

    media_type = "text/plain"
