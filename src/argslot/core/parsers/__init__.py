"""Token classification and value conversion helpers."""

from argslot.core.parsers.names import is_valid_name, binary_name_from_path
from argslot.core.parsers.conversion import SUPPORTED_KINDS, convert_value, default_for

__all__ = [
    "is_valid_name",
    "binary_name_from_path",
    "SUPPORTED_KINDS",
    "convert_value",
    "default_for",
]
