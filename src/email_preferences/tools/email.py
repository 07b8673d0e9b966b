"""Email related tools."""


def normalize_email(email: str | None) -> str:
    """Strip surrounding whitespace from an email address, None becoming an empty string."""
    return (email or "").strip()


def build_email_search_query(email: str) -> str:
    """
    Build the SGQL query matching a contact email regardless of case.

    Backslashes and single quotes are escaped so the address cannot break out of
    the string literal.
    """
    escaped = normalize_email(email).replace("\\", "\\\\").replace("'", "\\'")
    return f"lower(email) = lower('{escaped}')"
