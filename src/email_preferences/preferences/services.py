"""Preferences query and reconciliation services."""

import logging
import re
from concurrent.futures import ThreadPoolExecutor, as_completed

from django.conf import settings

from email_preferences.directory import directory_handler
from email_preferences.directory.backends import Contact
from email_preferences.directory.exceptions import DirectoryUnavailable
from email_preferences.enums import Account, Outcome
from email_preferences.tools.email import normalize_email

from .schemas import ListPreference, OutcomeMessage, PreferencesSubmission, PreferencesView

logger = logging.getLogger(__name__)

HIDDEN_LIST_TAG = "[SPECIAL]"
TAG_PREFIX_RE = re.compile(r"^\[[^\]]*\] ")


def display_name(name: str) -> str:
    """Strip the bracketed tag prefix from a list name, `[SPECIAL] Rangers` becoming `Rangers`."""
    return TAG_PREFIX_RE.sub("", name, count=1)


def is_hidden(name: str) -> bool:
    """Tell if a list is hidden from contacts who are not subscribed to it."""
    return name.startswith(HIDDEN_LIST_TAG)


def lists_to_remove(current_list_ids, desired_list_ids) -> set[str]:
    """Return the lists a contact belongs to but no longer wants."""
    return set(current_list_ids) - set(desired_list_ids)


def get_preferences(email, account=None, preselected_list_ids=None, backend=None) -> PreferencesView:
    """
    Return the profile of a contact and the lists it can subscribe to.

    An email unknown to the directory yields a blank profile. For such a new contact,
    `preselected_list_ids` are shown as subscribed. Lists tagged `[SPECIAL]` are only
    shown when subscribed, pre-selected ones included.

    Raises:
        DirectoryUnavailable: If a directory call fails

    """
    account = Account.from_value(account)
    if backend is None:
        backend = directory_handler(account)
    email = normalize_email(email)

    contact = backend.search_contact(email) if email else None
    if contact is None:
        contact = Contact.blank(email)

    subscribed = contact.list_ids
    if contact.id is None and preselected_list_ids:
        subscribed = set(preselected_list_ids)

    mailing_lists = sorted(backend.get_lists(), key=lambda mailing_list: display_name(mailing_list.name))

    lists = [
        ListPreference(
            id=mailing_list.id,
            name=display_name(mailing_list.name),
            is_subscribed=mailing_list.id in subscribed,
        )
        for mailing_list in mailing_lists
        if not is_hidden(mailing_list.name) or mailing_list.id in subscribed
    ]

    return PreferencesView(
        email=contact.email,
        contact_id=contact.id,
        first_name=contact.first_name or "",
        last_name=contact.last_name or "",
        lists=lists,
    )


def remove_from_lists(backend, contact_id, list_ids) -> set[str]:
    """
    Remove a contact from several lists in parallel.

    Every removal is attempted and waited for; a failing removal is logged and does
    not stop the others.

    Returns:
        set[str]: The lists the contact could not be removed from

    """
    failed = set()
    if not list_ids:
        return failed

    max_workers = min(len(list_ids), getattr(settings, "EMAIL_PREFERENCES_MAX_WORKERS", 8))
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(backend.remove_contact_from_list, contact_id, list_id): list_id
            for list_id in sorted(list_ids)
        }
        for future in as_completed(futures):
            list_id = futures[future]
            try:
                future.result()
            except DirectoryUnavailable as err:
                logger.warning("Could not remove contact %s from list %s: %s", contact_id, list_id, err)
                failed.add(list_id)

    return failed


def save_preferences(submission: PreferencesSubmission, backend=None) -> OutcomeMessage:
    """
    Bring the directory in line with the submitted preferences.

    - known contact with lists: remove it from the lists it left, then update it
    - known contact without lists: delete it
    - new contact: create it

    Raises:
        DirectoryUnavailable: If a directory call other than a list removal fails

    """
    if backend is None:
        backend = directory_handler(submission.account)
    desired_list_ids = set(submission.list_ids)
    contact = Contact(
        email=normalize_email(submission.email),
        id=submission.contact_id or None,
        first_name=submission.first_name,
        last_name=submission.last_name,
    )

    if contact.id and desired_list_ids:
        # Current memberships come from the directory, the submitted state may be stale
        current_list_ids = backend.get_contact(contact.id).list_ids
        failed = remove_from_lists(backend, contact.id, lists_to_remove(current_list_ids, desired_list_ids))
        if failed:
            logger.warning("Contact %s is still in lists %s after update", contact.id, ", ".join(sorted(failed)))
        backend.create_or_update_contact(contact, desired_list_ids)
        return OutcomeMessage(Outcome.UPDATED)

    if contact.id:
        backend.delete_contact(contact.id)
        return OutcomeMessage(Outcome.UNSUBSCRIBED)

    backend.create_or_update_contact(contact, desired_list_ids)
    return OutcomeMessage(Outcome.CREATED)
