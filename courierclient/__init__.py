"""Client library for the Courier notification API."""

__version__ = "2.7.0"