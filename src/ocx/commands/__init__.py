"""CLI commands for ocx."""
