"""Domain layer - the pattern models themselves."""
