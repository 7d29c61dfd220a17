"""Unit tests for usage and error listings."""

from argslot import ArgumentManager
from argslot.core.usage import UsageEntry, build_usage_sections, render_usage
from argslot.domain.types.option import Option


class TestUsage:
    """Tests for ArgumentManager.usage."""

    def test_full_layout(self):
        manager = ArgumentManager("demo", "Demo tool")
        manager.add("-o", "--output", help="output file")
        manager.add("--count", optional=True, help="how many")
        manager.add("--input")
        manager.parse(["/bin/demo"])

        assert manager.usage() == (
            "demo\n"
            "====\n"
            "Demo tool\n"
            "\n"
            "usage : demo [Options]\n"
            "Required options:\n"
            " * -o, --output\toutput file\n"
            " * --input\n"
            "Optional options:\n"
            " * -h, --help\toutput the program's usage\n"
            " * --count\t\thow many\n"
        )

    def test_no_header_without_program_name(self):
        manager = ArgumentManager()
        manager.parse(["tool"])
        assert manager.usage().startswith("usage : tool [Options]\n")

    def test_header_without_description(self):
        manager = ArgumentManager("abc")
        assert manager.usage().startswith("abc\n===\n\nusage :  [Options]\n")

    def test_required_before_optional_regardless_of_order(self):
        manager = ArgumentManager()
        manager.add("--late-required")
        manager.add("--early-optional", optional=True)
        manager.add("--later-required")
        text = manager.usage()
        optional_header = text.index("Optional options:")
        assert text.index("--late-required") < optional_header
        assert text.index("--later-required") < optional_header
        assert text.index("--early-optional") > optional_header

    def test_fluent_changes_show_in_usage(self):
        manager = ArgumentManager()
        manager.add("--verbose").optional().help("talk more")
        sections = manager.usage_sections()
        assert [entry.name for entry in sections.optional] == ["-h", "--verbose"]
        assert sections.optional[-1].help_text == "talk more"


class TestUsageSections:
    """Tests for the display-ready usage structure."""

    def test_grouping_keeps_declaration_order(self):
        options = [
            Option(name="-a"),
            Option(name="-b", is_optional=True),
            Option(name="-c"),
        ]
        sections = build_usage_sections(options, binary_name="tool")
        assert [entry.name for entry in sections.required] == ["-a", "-c"]
        assert [entry.name for entry in sections.optional] == ["-b"]
        assert sections.invocation == "usage : tool [Options]"

    def test_entry_label_and_line(self):
        assert UsageEntry("-o", "--output").label == "-o, --output"
        assert UsageEntry("-o").to_line() == "* -o\n"
        assert UsageEntry("-o", help_text="out").to_line() == "* -o\t\tout\n"
        assert UsageEntry("-o", "--output", "out").to_line() == "* -o, --output\tout\n"

    def test_render_empty_groups(self):
        sections = build_usage_sections([], binary_name="x")
        assert render_usage(sections) == "usage : x [Options]\nRequired options:\nOptional options:\n"


class TestErrorMessages:
    """Tests for ArgumentManager.error_messages."""

    def test_numbered_listing(self, manager):
        manager.add("bad")
        manager.parse(["prog", "--nope"])
        assert manager.error_messages() == (
            " 1.  bad is not a valid option name, options must start with - or -- followed by a letter\n"
            " 2.  --nope is not a known option\n"
        )

    def test_empty_when_clean(self, manager):
        assert manager.error_messages() == ""

    def test_errors_property_is_a_copy(self, manager):
        manager.parse(["prog", "--nope"])
        manager.errors.clear()
        assert len(manager.errors) == 1
