"""Infrastructure layer - adapters, registries, patterns, logging and error handling."""
