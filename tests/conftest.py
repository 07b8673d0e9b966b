"""Fixtures for the test suite."""

import pytest

from email_preferences.directory.backends.dummy import DummyBackend
from email_preferences.directory.handler import DirectoryHandler
from email_preferences.preferences import services

DUMMY_BACKEND = "email_preferences.directory.backends.dummy.DummyBackend"


@pytest.fixture(autouse=True)
def directory_handler(monkeypatch):
    """
    Give each test its own directory handler.

    The module level handler caches one backend per account, settings changed
    in a test would otherwise not be seen.
    """
    handler = DirectoryHandler()
    monkeypatch.setattr(services, "directory_handler", handler)
    return handler


@pytest.fixture
def dummy_directory(settings, directory_handler):
    """Configure the dummy backend and return the instance used for the visitors account."""
    settings.EMAIL_PREFERENCES_DIRECTORY = {
        "BACKEND": DUMMY_BACKEND,
        "PARAMETERS": {
            "lists": [
                {"id": "L1", "name": "Kakadu News"},
                {"id": "L2", "name": "Booderee Updates"},
                {"id": "L3", "name": "[SPECIAL] Rangers Program"},
                {"id": "L4", "name": "Uluru Events"},
            ],
        },
    }
    backend = directory_handler("visitors")
    assert isinstance(backend, DummyBackend)
    return backend
