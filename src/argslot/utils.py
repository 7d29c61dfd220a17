"""
Utility functions for argslot.
"""

import os


def env_flag(name: str, default: bool = False) -> bool:
    """
    Read a boolean flag from the environment.

    Accepts the usual truthy spellings ("1", "true", "yes", "on"), case-insensitive.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or empty

    Returns:
        The parsed flag
    """
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")
