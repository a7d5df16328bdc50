"""Infrastructure layer: logging, singleton access and named registries."""
