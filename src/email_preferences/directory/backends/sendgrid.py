"""SendGrid Marketing Campaigns integration."""

import logging
from urllib.parse import quote

import requests

from email_preferences.directory.backends import Contact, MailingList
from email_preferences.directory.exceptions import DirectoryUnavailable
from email_preferences.tools.email import build_email_search_query

from .base import BaseBackend

logger = logging.getLogger(__name__)


def _vendor_errors(response):
    """Extract the error details SendGrid returns along with a failed response."""
    if response is None:
        return None
    try:
        return response.json().get("errors")
    except (ValueError, AttributeError):
        return response.text


class SendgridBackend(BaseBackend):
    """
    SendGrid Marketing Campaigns integration.

    Handles:
    - Contact lookup, creation, update and deletion
    - List enumeration and list membership removal
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.sendgrid.com",
        timeout: int = 10,
        page_size: int = 1000,
    ):
        """Configure the SendGrid backend."""
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._page_size = page_size

    @property
    def _headers(self):
        return {"Authorization": f"Bearer {self._api_key}"}

    def _url(self, path):
        return f"{self._base_url}{path}"

    def _request(self, method, url, allow_not_found=False, **kwargs):
        """
        Send a request to SendGrid and return the response.

        Returns None instead of raising when the resource does not exist and
        `allow_not_found` is set.
        """
        try:
            response = requests.request(method, url, headers=self._headers, timeout=self._timeout, **kwargs)
            if allow_not_found and response.status_code == requests.codes.not_found:
                return None
            response.raise_for_status()
        except requests.RequestException as err:
            logger.error(
                "SendGrid request %s %s failed: %s (errors: %s)",
                method,
                url,
                err,
                _vendor_errors(err.response),
            )
            raise DirectoryUnavailable(f"SendGrid request {method} {url} failed") from err
        return response

    @staticmethod
    def _parse(response, parser):
        """Apply `parser` to the JSON payload, turning malformed payloads into DirectoryUnavailable."""
        try:
            return parser(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as err:
            logger.error("Malformed SendGrid payload from %s: %s", response.url, err)
            raise DirectoryUnavailable("Malformed response from SendGrid") from err

    @staticmethod
    def _to_contact(raw) -> Contact:
        return Contact(
            email=raw["email"],
            id=raw["id"],
            first_name=raw.get("first_name") or "",
            last_name=raw.get("last_name") or "",
            list_ids=set(raw.get("list_ids") or []),
        )

    def search_contact(self, email: str) -> Contact | None:
        """Find a contact with an SGQL case-insensitive email query."""
        response = self._request(
            "POST",
            self._url("/v3/marketing/contacts/search"),
            allow_not_found=True,
            json={"query": build_email_search_query(email)},
        )
        if response is None:
            return None

        results = self._parse(response, lambda payload: payload.get("result") or [])
        if not results:
            return None
        return self._parse(response, lambda payload: self._to_contact(payload["result"][0]))

    def get_contact(self, contact_id: str) -> Contact:
        """Retrieve a contact by id, with its live list memberships."""
        logger.info("Getting current lists for %s", contact_id)
        response = self._request("GET", self._url(f"/v3/marketing/contacts/{quote(contact_id, safe='')}"))
        return self._parse(response, self._to_contact)

    def create_or_update_contact(self, contact: Contact, list_ids: set[str]) -> dict:
        """
        Upsert a SendGrid contact.

        SendGrid processes the upsert asynchronously and answers with a job id.
        """
        fields = {"email": contact.email, "first_name": contact.first_name, "last_name": contact.last_name}
        payload = {
            "list_ids": sorted(list_ids),
            # Names left out keep the value stored by SendGrid
            "contacts": [{key: value for key, value in fields.items() if value is not None}],
        }
        logger.info("Updating contact %s", payload)

        response = self._request("PUT", self._url("/v3/marketing/contacts"), json=payload)
        return self._parse(response, dict)

    def remove_contact_from_list(self, contact_id: str, list_id: str) -> None:
        """Remove a contact from one list."""
        logger.info("Removing contact %s from list %s", contact_id, list_id)
        self._request(
            "DELETE",
            self._url(f"/v3/marketing/lists/{quote(list_id, safe='')}/contacts"),
            params={"contact_ids": contact_id},
        )

    def delete_contact(self, contact_id: str) -> None:
        """Delete a contact."""
        logger.info("Deleting contact %s", contact_id)
        self._request("DELETE", self._url("/v3/marketing/contacts"), params={"ids": contact_id})

    def get_lists(self) -> list[MailingList]:
        """Return all lists, following SendGrid pagination."""
        lists = []
        url = self._url("/v3/marketing/lists")
        params = {"page_size": self._page_size}

        while url:
            response = self._request("GET", url, params=params)
            lists.extend(
                self._parse(
                    response,
                    lambda payload: [MailingList(id=raw["id"], name=raw["name"]) for raw in payload["result"]],
                )
            )
            url = self._parse(response, lambda payload: (payload.get("_metadata") or {}).get("next"))
            # The next link already carries the paging parameters
            params = None

        return lists
