"""Directory backend base module."""

from abc import ABC, abstractmethod

from email_preferences.directory.backends import Contact, MailingList


class BaseBackend(ABC):
    """
    Base class for all directory backends.

    A backend instance is bound to a single account: the credential it needs is given
    at construction time and never shared between instances.
    """

    @abstractmethod
    def search_contact(self, email: str) -> Contact | None:
        """
        Find a contact by email address, ignoring case.

        Args:
            email: Email address to look for

        Returns:
            Contact | None: The matching contact, None if the directory has none

        Raises:
            DirectoryUnavailable: If the directory call fails

        """

    @abstractmethod
    def get_contact(self, contact_id: str) -> Contact:
        """
        Retrieve a contact and its current list memberships.

        Raises:
            DirectoryUnavailable: If the directory call fails

        """

    @abstractmethod
    def create_or_update_contact(self, contact: Contact, list_ids: set[str]) -> dict:
        """
        Create or update a contact and assign it to the given lists.

        Args:
            contact: Contact information
            list_ids: Lists the contact must be added to

        Returns:
            dict: Service response

        Raises:
            DirectoryUnavailable: If the directory call fails

        """

    @abstractmethod
    def remove_contact_from_list(self, contact_id: str, list_id: str) -> None:
        """Remove a contact from a single list."""

    @abstractmethod
    def delete_contact(self, contact_id: str) -> None:
        """Delete a contact from the directory."""

    @abstractmethod
    def get_lists(self) -> list[MailingList]:
        """Return every list of the account."""
