"""Application layer: use cases and wire DTOs."""
