"""Enums for the email preferences module."""

from enum import StrEnum


class Account(StrEnum):
    """Directory account (tenant) a request operates against."""

    VISITORS = "visitors"
    MEDIA = "media"
    INDUSTRY = "industry"

    @classmethod
    def default(cls):
        """Account used when none or an unknown one is requested."""
        return cls.VISITORS

    @classmethod
    def from_value(cls, value):
        """Return the account matching `value`, falling back to the default account."""
        try:
            return cls(value)
        except ValueError:
            return cls.default()


class Outcome(StrEnum):
    """Result category of a preferences submission."""

    CREATED = "created"
    UPDATED = "updated"
    UNSUBSCRIBED = "unsubscribed"

    @property
    def message(self):
        """User facing message for the outcome."""
        return OUTCOME_MESSAGES[self]


OUTCOME_MESSAGES = {
    Outcome.CREATED: "Subscription created",
    Outcome.UPDATED: "Your preferences have been updated",
    Outcome.UNSUBSCRIBED: "You are now unsubscribed from all mailing lists",
}
