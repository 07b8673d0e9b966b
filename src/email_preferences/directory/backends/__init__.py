"""Directory backends module."""

from dataclasses import dataclass, field


@dataclass
class Contact:
    """
    Contact record as stored in the directory.

    Names left to None are unknown, and are not sent on update.
    """

    email: str
    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    list_ids: set[str] = field(default_factory=set)

    @classmethod
    def blank(cls, email: str) -> "Contact":
        """Build a placeholder for an email unknown to the directory."""
        return cls(email=email, first_name="", last_name="")


@dataclass
class MailingList:
    """Subscribable list owned by the directory."""

    id: str
    name: str
