"""Application layer - drives the pattern models."""
