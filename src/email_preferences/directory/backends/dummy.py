"""Dummy directory backend."""

import uuid
from copy import deepcopy

from email_preferences.directory.backends import Contact, MailingList
from email_preferences.directory.exceptions import DirectoryUnavailable

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """In-memory directory, for local development and tests."""

    def __init__(self, lists: list[dict] | None = None, contacts: list[dict] | None = None, **kwargs):
        """
        Seed the directory.

        `lists` items take MailingList fields, `contacts` items take Contact fields.
        Extra parameters (an `api_key` injected per account) are accepted and ignored.
        """
        self.lists = {raw["id"]: MailingList(**raw) for raw in lists or []}
        self.contacts = {}
        for raw in contacts or []:
            contact = Contact(**{**raw, "list_ids": set(raw.get("list_ids") or [])})
            contact.id = contact.id or uuid.uuid4().hex
            self.contacts[contact.id] = contact

    def _find(self, contact_id):
        try:
            return self.contacts[contact_id]
        except KeyError as err:
            raise DirectoryUnavailable(f"Unknown contact {contact_id!r}") from err

    def search_contact(self, email: str) -> Contact | None:
        """Find a contact by email, ignoring case."""
        for contact in self.contacts.values():
            if contact.email.lower() == email.lower():
                return deepcopy(contact)
        return None

    def get_contact(self, contact_id: str) -> Contact:
        """Return a copy of a stored contact."""
        return deepcopy(self._find(contact_id))

    def create_or_update_contact(self, contact: Contact, list_ids: set[str]) -> dict:
        """Upsert by email; list ids are added to the current memberships, unknown names kept."""
        existing = self.search_contact(contact.email)
        if existing is None:
            existing = Contact(email=contact.email, id=uuid.uuid4().hex)
        if contact.first_name is not None:
            existing.first_name = contact.first_name
        if contact.last_name is not None:
            existing.last_name = contact.last_name
        existing.list_ids |= set(list_ids)
        self.contacts[existing.id] = existing
        return {"id": existing.id}

    def remove_contact_from_list(self, contact_id: str, list_id: str) -> None:
        """Remove a contact from one list."""
        self._find(contact_id).list_ids.discard(list_id)

    def delete_contact(self, contact_id: str) -> None:
        """Delete a contact."""
        self._find(contact_id)
        del self.contacts[contact_id]

    def get_lists(self) -> list[MailingList]:
        """Return all lists."""
        return [deepcopy(mailing_list) for mailing_list in self.lists.values()]
