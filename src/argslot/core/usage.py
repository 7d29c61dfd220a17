"""Usage description for a set of declared options.

``build_usage_sections`` produces a display-ready structure; ``render_usage``
turns it into the plain-text layout printed by hosts:

    demo
    ====
    Demo tool

    usage : demo [Options]
    Required options:
     * -o, --output	output file
    Optional options:
     * -h, --help	output the program's usage
"""

from dataclasses import dataclass, field
from typing import Iterable

from argslot.domain.types.option import Option

__all__ = ["UsageEntry", "UsageSections", "build_usage_sections", "render_usage"]


@dataclass(frozen=True)
class UsageEntry:
    """One option line of the usage listing."""

    name: str
    alt_name: str = ""
    help_text: str = ""

    @classmethod
    def from_option(cls, option: Option) -> "UsageEntry":
        return cls(name=option.name, alt_name=option.alt_name, help_text=option.help_text)

    @property
    def label(self) -> str:
        """The spellings as shown in usage, e.g. '-o, --output'."""
        if self.alt_name:
            return f"{self.name}, {self.alt_name}"
        return self.name

    def to_line(self) -> str:
        line = f"* {self.label}"
        if self.help_text:
            # Single-name labels are short, so they get an extra tab to line up
            line += "\t" if self.alt_name else "\t\t"
            line += self.help_text
        return line + "\n"


@dataclass(frozen=True)
class UsageSections:
    """Display-ready usage data: header, invocation line and grouped options."""

    program_name: str
    description: str
    binary_name: str
    required: list[UsageEntry] = field(default_factory=list)
    optional: list[UsageEntry] = field(default_factory=list)

    @property
    def invocation(self) -> str:
        return f"usage : {self.binary_name} [Options]"


def build_usage_sections(
    options: Iterable[Option],
    program_name: str = "",
    description: str = "",
    binary_name: str = "",
) -> UsageSections:
    """
    Group declared options into required and optional entries.

    Declaration order is kept within each group.

    Args:
        options: Declared options in declaration order
        program_name: Program name shown as the usage header (header omitted when empty)
        description: One-line description shown under the header
        binary_name: Binary name derived from the parsed argv

    Returns:
        UsageSections ready for rendering
    """
    required: list[UsageEntry] = []
    optional: list[UsageEntry] = []
    for option in options:
        (optional if option.is_optional else required).append(UsageEntry.from_option(option))

    return UsageSections(
        program_name=program_name,
        description=description,
        binary_name=binary_name,
        required=required,
        optional=optional,
    )


def render_usage(sections: UsageSections) -> str:
    """Render usage sections as plain text."""
    usage = ""

    if sections.program_name:
        usage += sections.program_name + "\n"
        usage += "=" * len(sections.program_name) + "\n"
        if sections.description:
            usage += sections.description + "\n"
        usage += "\n"

    usage += sections.invocation + "\n"
    usage += "Required options:\n"
    for entry in sections.required:
        usage += " " + entry.to_line()
    usage += "Optional options:\n"
    for entry in sections.optional:
        usage += " " + entry.to_line()

    return usage
