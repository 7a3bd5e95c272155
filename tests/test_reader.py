from .base import Base
from simpleini import Ini, Options, DEFAULT_SECTION_NAME
import logging
import pytest

advanced = Options(advanced=True)
multiline = Options(multiline=True)


class TestReader:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("plain", None),
            ('"quoted value"', "quoted value"),
            ("spaced    out   value", "spaced out value"),
            ("", ""),
            ("a = b", None),
            ("[not a section]", None),
        ],
    )
    def test_read_and_access(self, value, expected):
        base = Base()
        base.add_comment()
        base.add_entry(value, expected)
        base.add_section()
        base.add_comment()
        base.add_entry(value, expected)
        base.verify(base.read())

    def test_default_section_before_header(self):
        ini = Ini()
        ini.loads("top = 1\n[section]\ninner = 2")
        assert ini.default_section.get("top") == "1"
        assert ini["section"].get("inner") == "2"
        assert ini["section"].get("top") is None

    def test_sections_reference_default_section(self):
        ini = Ini()
        ini.loads("[section]\nkey = value")
        assert ini["section"].default_section is ini.default_section

    @pytest.mark.parametrize(
        "content",
        [
            "",
            "\n\n\n",
            "; only\n   ; comments\n\n;and blanks",
        ],
    )
    def test_only_comments_and_blanks(self, content):
        ini = Ini()
        ini.loads(content)
        assert ini.is_empty()
        assert ini.default_section.is_empty()

    def test_invalid_lines_are_ignored(self):
        ini = Ini()
        ini.loads("[section]\nkey = value\nthis is no entry\n1 = one\n[]")
        assert ini.size() == 2
        assert ini["section"].items() == [("key", "value")]

    def test_header_without_name_keeps_current_section(self):
        ini = Ini(advanced)
        ini.loads('[section]\na = 1\n[count=5]\nb = 2')
        assert ini.size() == 2
        assert ini["section"].items() == [("a", "1"), ("b", "2")]

    def test_repeated_section_replaces(self):
        ini = Ini()
        ini.loads("[section]\na = 1\n[section]\nb = 2")
        assert ini.size() == 2
        assert ini["section"].items() == [("b", "2")]

    def test_default_header_continues_default_section(self):
        ini = Ini()
        ini.loads(f"a = 1\n[other]\nb = 2\n[{DEFAULT_SECTION_NAME}]\nc = 3")
        assert ini.size() == 2
        assert dict(ini.default_section.items()) == {"a": "1", "c": "3"}

    def test_section_name_is_normalized(self):
        ini = Ini()
        ini.loads("[My   Section]\nkey = value")
        assert ini.get_section("My-Section").get("key") == "value"

    def test_line_endings(self):
        ini = Ini()
        ini.loads("a = 1\r\n[section]\r\nb = 2\rc = 3")
        assert ini.default_section.get("a") == "1"
        assert ini["section"].items() == [("b", "2"), ("c", "3")]

    @pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028"])
    @pytest.mark.parametrize("options", [Options(), multiline])
    def test_unicode_line_boundaries_stay_in_value(self, separator, options):
        ini = Ini(options)
        ini.loads(f"key = a{separator}b\nother = c d")
        assert ini.default_section.items() == [("key", "a b"), ("other", "c d")]

    def test_ignored_lines_are_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="simpleini.reader")
        ini = Ini()
        ini.loads("[section]\nkey = value\nthis is no entry\n[count=5]")
        assert ini["section"].items() == [("key", "value")]
        messages = [
            record.getMessage()
            for record in caplog.records
            if record.name == "simpleini.reader"
        ]
        assert "Line 3 is being ignored because it's invalid." in messages
        assert (
            "Line 4 is being ignored because the section header has no name."
            in messages
        )
        assert all(
            record.levelno == logging.DEBUG
            for record in caplog.records
            if record.name == "simpleini.reader"
        )

    def test_load_keeps_existing_sections(self):
        ini = Ini()
        ini.loads("[a]\nx = 1")
        ini.loads("[b]\ny = 2")
        assert ini.section_exists("a")
        assert ini.section_exists("b")


class TestAttributes:

    def test_attributes_read_when_advanced(self):
        base = Base(advanced)
        name = base.add_section('attr="x" count=5')
        base.add_entry()
        ini = base.read()
        base.verify(ini)
        attributes = ini[name].get_attributes()
        assert attributes.get("attr") == "x"
        assert attributes.get_as_number("count") == 5

    def test_attributes_ignored_by_default(self):
        base = Base()
        name = base.add_section('attr="x" count=5')
        ini = base.read()
        assert ini[name].attributes.is_empty()
        assert not ini[name].has_attributes

    def test_load_options_replace_document_options(self):
        ini = Ini()
        ini.loads('[section attr="x"]', advanced)
        assert ini.options == advanced
        assert ini["section"].attributes.get("attr") == "x"


class TestMultiline:

    def test_continuation(self):
        ini = Ini(multiline)
        ini.loads('key = "partial\nrest"')
        assert ini.default_section.get("key") == "partial rest"

    def test_multiple_continuations(self):
        ini = Ini(multiline)
        ini.loads("[section]\nkey = first\n  second\n    third\nother = 1")
        assert ini["section"].get("key") == "first second third"
        assert ini["section"].get("other") == "1"

    def test_continuation_at_end_of_content(self):
        ini = Ini(multiline)
        ini.loads("key = first\nlast")
        assert ini.default_section.get("key") == "first last"

    def test_comments_and_blanks_are_skipped(self):
        ini = Ini(multiline)
        ini.loads("key = first\n; comment\n\nsecond")
        assert ini.default_section.get("key") == "first second"

    def test_continuation_stops_at_entry_and_section(self):
        ini = Ini(multiline)
        ini.loads("a = 1\nmore\nb = 2\n[section]\nc = 3\nrest")
        assert ini.default_section.items() == [("a", "1 more"), ("b", "2")]
        assert ini["section"].items() == [("c", "3 rest")]

    def test_continuation_ignored_without_multiline(self):
        ini = Ini()
        ini.loads('key = "partial\nrest"')
        assert ini.default_section.get("key") == '"partial'

    def test_continuation_after_new_section_waits_for_entry(self):
        # the last entry is not part of the new section, the buffer is kept
        ini = Ini(multiline)
        ini.loads("a = 1\n[section]\norphan\nb = 2\nc = 3")
        assert ini.default_section.get("a") == "1"
        assert ini["section"].get("b") == "2 orphan"
        assert ini["section"].get("c") == "3"
