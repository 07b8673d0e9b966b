"""Custom value classes for django-configurations."""

import os

from configurations import values

from email_preferences.enums import Account


class AccountApiKeysValue(values.Value):
    """
    Class used to build the account to directory api key mapping from environment variables.

    Each account reads its own key, with in order of priority:
    * The content of the file referenced by the environment variable
      `{name}_{ACCOUNT}_{file_suffix}` if set.
    * The value of the environment variable `{name}_{ACCOUNT}` if set.

    Accounts without a key are left out of the mapping. The default value is used
    when no account has one.
    """

    file_suffix = "FILE"

    def __init__(self, *args, **kwargs):
        """Initialize the value."""
        if "file_suffix" in kwargs:
            self.file_suffix = kwargs.pop("file_suffix")
        super().__init__(*args, **kwargs)

    def _read_file(self, filename):
        if not os.path.exists(filename):
            raise ValueError(f"Path {filename!r} does not exist.")
        try:
            with open(filename) as file:
                return file.read().removesuffix("\n")
        except (OSError, PermissionError) as err:
            raise ValueError(f"Path {filename!r} cannot be read: {err!r}") from err

    def setup(self, name):
        """Get the api keys from environment variables."""
        value = self.default
        if self.environ:
            full_environ_name = self.full_environ_name(name)
            api_keys = {}
            for account in Account:
                account_environ_name = f"{full_environ_name}_{account.name}"
                account_environ_name_file = f"{account_environ_name}_{self.file_suffix}"
                if account_environ_name_file in os.environ:
                    api_keys[account.value] = self._read_file(os.environ[account_environ_name_file])
                elif account_environ_name in os.environ:
                    api_keys[account.value] = os.environ[account_environ_name]

            if api_keys:
                value = api_keys
            elif self.environ_required:
                raise ValueError(
                    f"Value {name!r} is required to be set for at least one account as the "
                    f"environment variable {full_environ_name}_<ACCOUNT> or "
                    f"{full_environ_name}_<ACCOUNT>_{self.file_suffix}"
                )
        self.value = value
        return value
