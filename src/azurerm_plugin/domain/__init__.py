"""Domain layer - identifiers, validation, typed resource models and ports."""
