"""Export Cloud Domains registrations as DNS/redirect configuration blocks."""

__version__ = "0.1.0"
