"""Preferences module."""
