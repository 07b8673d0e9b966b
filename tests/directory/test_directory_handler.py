"""Test the directory handler."""

import pytest
from django.core.exceptions import ImproperlyConfigured

from email_preferences.directory.backends.dummy import DummyBackend
from email_preferences.directory.backends.sendgrid import SendgridBackend
from email_preferences.directory.exceptions import DirectoryInvalidBackendError
from email_preferences.directory.handler import DirectoryHandler
from email_preferences.enums import Account


def test_directory_handler_from_settings():
    """Test the directory handler from the settings."""
    handler = DirectoryHandler()

    backend = handler("media")

    assert isinstance(backend, SendgridBackend)
    assert backend._api_key == "media-api-key"


def test_directory_handler_from_backend():
    """Test the directory handler from the backend."""
    handler = DirectoryHandler(backend={"BACKEND": "email_preferences.directory.backends.dummy.DummyBackend"})
    assert isinstance(handler(), DummyBackend)


def test_directory_handler_one_backend_per_account():
    """Test each account gets its own backend, built once."""
    handler = DirectoryHandler()

    visitors = handler(Account.VISITORS)
    industry = handler(Account.INDUSTRY)

    assert visitors is not industry
    assert visitors._api_key == "visitors-api-key"
    assert industry._api_key == "industry-api-key"
    assert handler("visitors") is visitors


@pytest.mark.parametrize("account", [None, "", "unknown"])
def test_directory_handler_default_account(account):
    """Test missing or unknown accounts use the visitors account."""
    handler = DirectoryHandler()

    assert handler(account) is handler(Account.VISITORS)


def test_directory_handler_parameters():
    """Test the backend parameters are passed along with the api key."""
    handler = DirectoryHandler(
        backend={
            "BACKEND": "email_preferences.directory.backends.sendgrid.SendgridBackend",
            "PARAMETERS": {"timeout": 3},
        },
        api_keys={"visitors": "key"},
    )

    backend = handler()

    assert backend._timeout == 3
    assert backend._api_key == "key"


def test_directory_handler_missing_api_key():
    """Test an account without api key should raise an error."""
    handler = DirectoryHandler(api_keys={"visitors": "key"})

    with pytest.raises(ImproperlyConfigured, match="industry"):
        handler("industry")


def test_directory_handler_without_api_keys(settings):
    """Test the api key is not injected when no api keys are configured."""
    settings.EMAIL_PREFERENCES_API_KEYS = None
    handler = DirectoryHandler(
        backend={
            "BACKEND": "email_preferences.directory.backends.sendgrid.SendgridBackend",
            "PARAMETERS": {"api_key": "shared-key"},
        }
    )

    assert handler("media")._api_key == "shared-key"


def test_directory_handler_invalid_backend():
    """Test an unknown backend should raise an error."""
    handler = DirectoryHandler(backend={"BACKEND": "email_preferences.directory.backends.unknown.Backend"})

    with pytest.raises(DirectoryInvalidBackendError):
        handler()


def test_directory_backend_no_config(settings):
    """Test the directory handler when no config set should raise an error."""
    settings.EMAIL_PREFERENCES_DIRECTORY = None
    handler = DirectoryHandler()
    with pytest.raises(ImproperlyConfigured):
        handler()
