"""Infrastructure layer - logging, registries and process-wide state."""
