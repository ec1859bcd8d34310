"""Resource-list management core for the administrative console."""

__version__ = "0.1.0"
