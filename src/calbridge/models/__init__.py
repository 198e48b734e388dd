"""Schema exports for non-ADK tool registries."""
