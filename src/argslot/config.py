"""Configuration for the option registry."""

from dataclasses import dataclass


@dataclass
class RegistryConfig:
    """Configuration for an ArgumentManager."""

    # Value stored in every slot position until parsing overwrites it
    placeholder: str = "0"

    # Built-in help option
    help_name: str = "-h"
    help_alt_name: str = "--help"
    help_text: str = "output the program's usage"

    # Usage header
    program_name: str = ""
    description: str = ""
