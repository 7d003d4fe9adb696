"""Version information for ocx."""

__version__ = "0.1.0"
