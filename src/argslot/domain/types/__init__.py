"""Shared domain types."""

from argslot.domain.types.option import Option, OptionSlot

__all__ = [
    "Option",
    "OptionSlot",
]
