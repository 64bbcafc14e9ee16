"""Infrastructure layer: ready-made checks for common dependencies."""
