"""Factories for creating test data."""

import factory

from email_preferences.directory.backends import Contact, MailingList
from email_preferences.preferences.schemas import PreferencesSubmission


class ContactFactory(factory.Factory):
    """A factory to create directory contacts for testing purposes."""

    id = factory.Sequence(lambda n: f"contact-{n!s}")
    email = factory.Faker("email")
    first_name = factory.Faker("first_name")
    last_name = factory.Faker("last_name")
    list_ids = factory.LazyFunction(set)

    class Meta:  # noqa: D106
        model = Contact


class MailingListFactory(factory.Factory):
    """A factory to create directory lists for testing purposes."""

    id = factory.Sequence(lambda n: f"list-{n!s}")
    name = factory.Faker("catch_phrase")

    class Meta:  # noqa: D106
        model = MailingList


class PreferencesSubmissionFactory(factory.Factory):
    """A factory to create preferences submissions for testing purposes."""

    email = factory.Faker("email")
    first_name = factory.Faker("first_name")
    last_name = factory.Faker("last_name")
    list_ids = factory.LazyFunction(lambda: {"L1"})
    contact_id = None

    class Meta:  # noqa: D106
        model = PreferencesSubmission
