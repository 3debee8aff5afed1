"""Introduction path discovery over contact-connection graphs."""

__version__ = "0.1.0"
