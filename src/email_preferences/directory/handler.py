"""Directory backend handler."""

import threading

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from email_preferences.directory.exceptions import DirectoryInvalidBackendError
from email_preferences.enums import Account


class DirectoryHandler:
    """Directory handler managing one backend instance per account."""

    def __init__(self, backend=None, api_keys=None):
        """Initialize the directory handler."""
        # backend is an optional dict of directory backend definitions
        # (structured like settings.EMAIL_PREFERENCES_DIRECTORY), api_keys an optional
        # account to api key mapping (structured like settings.EMAIL_PREFERENCES_API_KEYS).
        self._backend = backend
        self._api_keys = api_keys
        self._directories = {}
        self._lock = threading.Lock()

    @cached_property
    def backend(self):
        """Put in cache the backend properties from the settings."""
        if self._backend is None:
            try:
                self._backend = settings.EMAIL_PREFERENCES_DIRECTORY.copy()
            except AttributeError as e:
                raise ImproperlyConfigured("settings.EMAIL_PREFERENCES_DIRECTORY is not configured") from e
        return self._backend

    @cached_property
    def api_keys(self):
        """Put in cache the api keys from the settings, keyed by account."""
        if self._api_keys is None:
            self._api_keys = getattr(settings, "EMAIL_PREFERENCES_API_KEYS", None)
        if self._api_keys is None:
            return None
        return {Account(account): api_key for account, api_key in self._api_keys.items()}

    def __call__(self, account=None):
        """Create if not existing the backend of the account and then return it."""
        account = Account.from_value(account)
        with self._lock:
            if account not in self._directories:
                self._directories[account] = self.create_directory(self.backend, account)
            return self._directories[account]

    def create_directory(self, params, account):
        """Instantiate and configure the directory backend of an account."""
        params = params.copy()
        backend = params.pop("BACKEND")
        parameters = params.pop("PARAMETERS", {}).copy()

        if self.api_keys is not None:
            try:
                parameters["api_key"] = self.api_keys[account]
            except KeyError as e:
                raise ImproperlyConfigured(f"No directory api key configured for account {account!r}") from e

        try:
            klass = import_string(backend)
        except ImportError as e:
            raise DirectoryInvalidBackendError(f"Could not find backend {backend!r}: {e}") from e
        return klass(**parameters)
