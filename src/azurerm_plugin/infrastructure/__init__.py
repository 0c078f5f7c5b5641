"""Infrastructure layer - logging, exceptions and the resource registry."""
