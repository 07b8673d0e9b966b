"""Tools module."""
