"""Option declaration types.

An ``Option`` carries the declaration metadata of one command-line option;
an ``OptionSlot`` binds it to the raw values produced by parsing.
"""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, field_validator

from argslot.core.parsers.names import is_valid_name

__all__ = ["Option", "OptionSlot"]


class Option(BaseModel):
    """A declared named argument."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(..., description="Primary spelling, e.g. '-o'")
    alt_name: str = Field(default="", description="Secondary spelling, e.g. '--output' ('' when unused)")
    arity: int = Field(default=1, ge=1, description="Number of values the option consumes")
    is_optional: bool = Field(default=False, description="Whether usage lists the option as optional")
    help_text: str = Field(default="", description="Description shown in usage")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not is_valid_name(value):
            raise ValueError(f"{value!r} is not a valid option name")
        return value

    @field_validator("alt_name")
    @classmethod
    def _check_alt_name(cls, value: str) -> str:
        if value and not is_valid_name(value):
            raise ValueError(f"{value!r} is not a valid option name")
        return value

    @property
    def names(self) -> tuple[str, ...]:
        """Every spelling of the option, primary first."""
        return (self.name, self.alt_name) if self.alt_name else (self.name,)

    def optional(self, flag: bool = True) -> "Option":
        """Mark the option optional (or required) and return it for chaining."""
        self.is_optional = flag
        return self

    def help(self, text: str) -> "Option":
        """Set the help text and return the option for chaining."""
        self.help_text = text
        return self

    def to_display_dict(self) -> dict[str, str | bool]:
        """Convert to dictionary for display.

        Returns:
            Dictionary with the spellings, optionality and help text
        """
        return {
            "name": self.name,
            "alt_name": self.alt_name,
            "optional": self.is_optional,
            "help": self.help_text,
        }


@dataclass
class OptionSlot:
    """An option together with its current raw values.

    ``values`` has exactly ``option.arity`` entries for the lifetime of the slot.
    """

    option: Option
    values: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.values) != self.option.arity:
            raise ValueError(
                f"Slot for {self.option.name} holds {len(self.values)} values, expected {self.option.arity}"
            )
