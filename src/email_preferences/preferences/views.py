"""API views of the preferences form."""

import logging

from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from email_preferences.directory.exceptions import DirectoryUnavailable

from . import serializers, services
from .parsers import PlainTextJSONParser

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong"


class PublicAPIView(APIView):
    """Base view for endpoints called anonymously by the form."""

    authentication_classes = []
    permission_classes = [AllowAny]

    def directory_error_response(self):
        """Response sent when the directory could not be reached."""
        return Response({"error": GENERIC_ERROR}, status=status.HTTP_502_BAD_GATEWAY)


class PreferencesDataView(PublicAPIView):
    """Return the preferences of a contact."""

    def get(self, request):
        """
        Return the profile and lists of the contact matching the `email` parameter.

        Lists passed as `listId` parameters are pre-selected for new contacts.
        """
        try:
            preferences = services.get_preferences(
                request.query_params.get("email", ""),
                account=request.query_params.get("account"),
                preselected_list_ids=request.query_params.getlist("listId"),
            )
        except DirectoryUnavailable:
            logger.exception("Could not load preferences")
            return self.directory_error_response()

        return Response(serializers.PreferencesViewSerializer(preferences).data)


class PreferencesSubmitView(PublicAPIView):
    """Save the preferences of a contact."""

    parser_classes = [JSONParser, PlainTextJSONParser]

    def post(self, request):
        """Reconcile the directory with the submitted preferences."""
        try:
            data = request.data
        except ParseError as err:
            logger.info("Unparseable preferences payload: %s", err)
            return Response({"error": "Invalid payload"}, status=status.HTTP_400_BAD_REQUEST)

        if not data:
            return Response({"error": "No payload provided"}, status=status.HTTP_400_BAD_REQUEST)

        serializer = serializers.PreferencesSubmissionSerializer(data=data)
        if not serializer.is_valid():
            logger.info("Invalid preferences payload: %s", serializer.errors)
            return Response({"error": "Invalid payload"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            outcome = services.save_preferences(serializer.save())
        except DirectoryUnavailable:
            logger.exception("Could not save preferences")
            return self.directory_error_response()

        return Response({"message": outcome.message})
