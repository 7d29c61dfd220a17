"""Core option registry, parsing and usage."""
