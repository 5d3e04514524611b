"""Malas Ngoding learning platform API and the Ngeluh Dulu complaint journal."""

__version__ = "0.1.0"
