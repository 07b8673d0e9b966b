"""Data exchanged between the preferences services and their callers."""

from dataclasses import dataclass, field

from email_preferences.enums import Account, Outcome


@dataclass
class ListPreference:
    """A mailing list as presented to a contact."""

    id: str
    name: str
    is_subscribed: bool = False


@dataclass
class PreferencesView:
    """A contact profile with the lists it can subscribe to."""

    email: str
    contact_id: str | None = None
    first_name: str = ""
    last_name: str = ""
    lists: list[ListPreference] = field(default_factory=list)


@dataclass
class PreferencesSubmission:
    """Preferences submitted by a contact; `list_ids` replaces the current memberships."""

    email: str
    list_ids: set[str] = field(default_factory=set)
    contact_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    account: Account = Account.VISITORS


@dataclass
class OutcomeMessage:
    """Result of a preferences submission."""

    outcome: Outcome

    @property
    def message(self):
        """User facing message."""
        return self.outcome.message
