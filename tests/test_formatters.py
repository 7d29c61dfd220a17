from argslot import ArgumentManager
from argslot.presentation import build_values_table, format_errors_text, format_usage_text


def make_manager() -> ArgumentManager:
    manager = ArgumentManager("demo", "Demo tool")
    manager.add("-o", "--output", help="output file")
    manager.add("--count", optional=True)
    manager.parse(["/bin/demo", "-o", "out.txt"])
    return manager


def test_format_usage_text_lists_groups():
    text = format_usage_text(make_manager().usage_sections())
    plain = text.plain
    assert plain.startswith("demo\nDemo tool\n")
    assert "usage : demo [Options]" in plain
    assert plain.index("-o, --output") < plain.index("Optional options:") < plain.index("--count")
    assert "output file" in plain


def test_format_errors_text_numbers_messages():
    text = format_errors_text(["first", "second"])
    assert " 1. first" in text.plain
    assert " 2. second" in text.plain


def test_format_errors_text_without_errors():
    assert format_errors_text([]).plain == "No errors."


def test_build_values_table_rows():
    table = build_values_table(make_manager())
    assert table.row_count == 3
    assert table.title == "demo"
    option_cells = list(table.columns[0].cells)
    value_cells = list(table.columns[1].cells)
    given_cells = list(table.columns[2].cells)
    optional_cells = list(table.columns[3].cells)
    help_cells = list(table.columns[4].cells)
    assert option_cells == ["-h, --help", "-o, --output", "--count"]
    assert value_cells == ["0", "out.txt", "0"]
    assert given_cells == ["no", "yes", "no"]
    assert optional_cells == ["yes", "no", "yes"]
    assert help_cells == ["output the program's usage", "output file", ""]
