"""Declare command-line options, parse argv against them and read typed values back."""

from argslot.config import RegistryConfig
from argslot.core.parsers.names import is_valid_name
from argslot.core.registry import ArgumentManager
from argslot.core.usage import UsageEntry, UsageSections
from argslot.domain.types.option import Option

__version__ = "0.1.0"

__all__ = [
    "ArgumentManager",
    "Option",
    "RegistryConfig",
    "UsageEntry",
    "UsageSections",
    "is_valid_name",
]
