"""Email preferences module."""
