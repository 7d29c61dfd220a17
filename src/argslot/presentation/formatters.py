"""
Rich renderings of usage, diagnostics and parsed values.
"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from argslot.core.registry import ArgumentManager
from argslot.core.usage import UsageEntry, UsageSections


def _append_entries(text: Text, title: str, entries: list[UsageEntry]) -> None:
    text.append(f"{title}\n", style="bold")
    for entry in entries:
        text.append("  ")
        text.append(entry.label, style="cyan")
        if entry.help_text:
            text.append(f"  {entry.help_text}", style="dim")
        text.append("\n")


def format_usage_text(sections: UsageSections) -> Text:
    """
    Build a styled usage block from usage sections.

    Mirrors the plain-text layout: header, invocation line, then required
    and optional options.
    """
    text = Text()
    if sections.program_name:
        text.append(f"{sections.program_name}\n", style="bold underline")
        if sections.description:
            text.append(f"{sections.description}\n")
        text.append("\n")

    text.append(f"{sections.invocation}\n", style="green")
    _append_entries(text, "Required options:", sections.required)
    _append_entries(text, "Optional options:", sections.optional)
    return text


def format_errors_text(errors: list[str]) -> Text:
    """Return the numbered diagnostics in red, or a green confirmation when there are none."""
    if not errors:
        return Text("No errors.", style="green")

    text = Text()
    for number, message in enumerate(errors, start=1):
        text.append(f" {number}. ", style="bold red")
        text.append(f"{message}\n", style="red")
    return text


def build_values_table(manager: ArgumentManager) -> Table:
    """
    Tabulate every declared option with its current raw values.

    Options that did not appear on the parsed command line are dimmed.
    """
    table = Table(title=manager.binary_name or None)
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Values")
    table.add_column("Given", justify="center")
    table.add_column("Optional", justify="center")
    table.add_column("Help", style="dim")

    for option in manager.options():
        display = option.to_display_dict()
        given = manager.was_given(option.name)
        label = display["name"] if not display["alt_name"] else f"{display['name']}, {display['alt_name']}"
        table.add_row(
            label,
            " ".join(manager.values(option.name)),
            "yes" if given else "no",
            "yes" if display["optional"] else "no",
            display["help"],
            style=None if given else "dim",
        )
    return table
