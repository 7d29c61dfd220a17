"""Option declarations file parser.

Parses JSON files describing a program's options and builds an
ArgumentManager from them:

    {
      "program": "demo",
      "description": "Demo tool",
      "options": [
        {"name": "-o", "alt_name": "--output", "help": "output file", "default": ["out.txt"]},
        {"name": "--count", "arity": 1, "optional": true}
      ]
    }
"""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from argslot.config import RegistryConfig
from argslot.core.registry import ArgumentManager
from argslot.logger import get_logger

logger = get_logger("declarations")


class OptionDeclaration(BaseModel):
    """Declaration of a single option.

    Names are not checked here: invalid spellings reach the registry, which
    reports them as declaration diagnostics.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Primary spelling")
    alt_name: Optional[str] = Field(None, description="Secondary spelling")
    arity: int = Field(default=1, ge=0, description="Number of values (0 is treated as 1)")
    optional: bool = Field(default=False, description="Whether the option is optional")
    help: str = Field(default="", description="Help text shown in usage")
    default: Optional[list[str]] = Field(None, description="Default values; their count overrides arity")

    @model_validator(mode="after")
    def _check_default(self) -> "OptionDeclaration":
        if self.default is not None and not self.default:
            raise ValueError(f"default for {self.name} must contain at least one value")
        return self


class DeclarationsFile(BaseModel):
    """A program's option declarations."""

    model_config = ConfigDict(frozen=True)

    program: str = Field(default="", description="Program name shown in the usage header")
    description: str = Field(default="", description="Program description shown in usage")
    options: list[OptionDeclaration] = Field(default_factory=list, description="Declared options")


def load_declarations(config_path: str | Path) -> DeclarationsFile:
    """
    Load option declarations from a JSON file.

    Args:
        config_path: Path to the JSON declarations file

    Returns:
        DeclarationsFile: Parsed declarations

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the JSON file is invalid
        ValidationError: If the declarations structure is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        error_msg = f"Declarations file not found: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    logger.info(f"Loading option declarations from: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in declarations file {config_path}: {e}")
        raise

    try:
        declarations = DeclarationsFile.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid declarations structure in {config_path}: {e}")
        raise

    logger.info(f"Loaded {len(declarations.options)} option declaration(s)")
    for option in declarations.options:
        logger.debug(f"  - {option.name}{', ' + option.alt_name if option.alt_name else ''}")
    return declarations


def build_manager(
    declarations: DeclarationsFile,
    config: Optional[RegistryConfig] = None,
) -> ArgumentManager:
    """
    Create an ArgumentManager holding every declared option.

    Rejected declarations do not raise; they show up in the manager's
    diagnostics like any other declaration error.
    """
    manager = ArgumentManager(declarations.program, declarations.description, config=config)
    for option in declarations.options:
        spec = list(option.default) if option.default is not None else option.arity
        if option.alt_name is None:
            manager.add(option.name, spec, optional=option.optional, help=option.help)
        else:
            manager.add(option.name, option.alt_name, spec, optional=option.optional, help=option.help)
    return manager
