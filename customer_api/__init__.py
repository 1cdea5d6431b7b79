"""Read-only customer configuration, zone lookup and maps passthrough API."""

__version__ = "0.1.0"
