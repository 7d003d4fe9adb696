"""External integrations (HTTP, shell) behind abstract interfaces."""
