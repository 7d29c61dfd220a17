"""Domain layer: option types."""
