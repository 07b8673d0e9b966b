"""Serializers for the preferences endpoints."""

from rest_framework import serializers

from email_preferences.enums import Account

from .schemas import PreferencesSubmission


class ListPreferenceSerializer(serializers.Serializer):
    """Serialize a list as presented to a contact."""

    id = serializers.CharField()
    name = serializers.CharField()
    isSubscribed = serializers.BooleanField(source="is_subscribed")


class PreferencesViewSerializer(serializers.Serializer):
    """Serialize the preferences of a contact for the form."""

    contactId = serializers.CharField(source="contact_id", allow_null=True)
    email = serializers.CharField(allow_blank=True)
    firstName = serializers.CharField(source="first_name", allow_blank=True)
    lastName = serializers.CharField(source="last_name", allow_blank=True)
    lists = ListPreferenceSerializer(many=True)


class PreferencesSubmissionSerializer(serializers.Serializer):
    """Validate the preferences submitted by the form."""

    account = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    contactId = serializers.CharField(source="contact_id", required=False, allow_blank=True, allow_null=True)
    email = serializers.EmailField()
    firstName = serializers.CharField(source="first_name", required=False, allow_blank=True, allow_null=True)
    lastName = serializers.CharField(source="last_name", required=False, allow_blank=True, allow_null=True)
    listIds = serializers.ListField(source="list_ids", child=serializers.CharField(), allow_empty=True)

    def validate_account(self, value):
        """Unknown accounts fall back to the default one."""
        return Account.from_value(value)

    def create(self, validated_data):
        """Build the submission handed to the reconciliation service."""
        return PreferencesSubmission(
            email=validated_data["email"],
            list_ids=set(validated_data["list_ids"]),
            contact_id=validated_data.get("contact_id") or None,
            first_name=validated_data.get("first_name"),
            last_name=validated_data.get("last_name"),
            account=validated_data["account"],
        )
