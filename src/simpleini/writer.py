"""Serializing an Ini document."""

from datetime import datetime
from typing import TYPE_CHECKING, TextIO
import re
import warnings
from .entities import ENTRY_PATTERN
from .exceptions_warnings import RoundTripWarning
from .globals import ASSIGN_MARKER, COMMENT_PREFIX, NUMBER_REGEX, SECTION_WRAPPERS
from .interface import Section
from .utils import clean_string_content

if TYPE_CHECKING:
    from .ini import Ini

NUMBER_PATTERN = re.compile(NUMBER_REGEX)


class _WriteIni:
    """Writes target as ini content. For more info cf. Ini.store."""

    def __init__(self, target: "Ini") -> None:
        self.target = target

    def ordered_sections(self) -> list[Section]:
        """Default section first, then the other sections sorted by name."""
        default = self.target.default_section
        others = sorted(
            (sec for sec in self.target.get_sections() if sec is not default),
            key=lambda sec: sec.name,
        )
        return [default, *others]

    def to_string(self) -> str:
        """Serialize target.

        Returns:
            str: The ini content.
        """
        out = self._header() + "\n"
        out += "\n".join(self._section(sec) for sec in self.ordered_sections())
        return out

    def store_all(self, sink: TextIO) -> None:
        """Write the serialized target into sink and flush it."""
        sink.write(self.to_string())
        sink.flush()

    def _header(self) -> str:
        timestamp = datetime.now().astimezone().strftime("%a %b %d %H:%M:%S %Z %Y")
        return f"{COMMENT_PREFIX} {timestamp}"

    def _section(self, section: Section) -> str:
        out = ""
        if section is not self.target.default_section:
            out += self._section_header(section) + "\n"
        for key, value in section.items():
            out += self._entry(key, value) + "\n"
        return out

    def _section_header(self, section: Section) -> str:
        opening, closing = SECTION_WRAPPERS
        header = f"{opening}{section.name}"
        if self.target.options.advanced and section.has_attributes:
            header += " " + " ".join(
                f"{key}{ASSIGN_MARKER}{self._attribute_value(value)}"
                for key, value in section.attributes.items()
            )
        return header + closing

    @staticmethod
    def _attribute_value(value: str) -> str:
        """Numbers are written as they are, everything else within double quotes."""
        if NUMBER_PATTERN.fullmatch(value):
            return value
        return f'"{value}"'

    @staticmethod
    def _entry(key: str, value: str) -> str:
        if ENTRY_PATTERN.fullmatch(f"{key} {ASSIGN_MARKER} ") is None:
            warnings.warn(
                f"Entry key '{key}' does not match the entry grammar and won't be"
                " read back.",
                RoundTripWarning,
                stacklevel=2,
            )
        # values are read back trimmed, whitespace collapsed and unquoted
        if clean_string_content(value) != value:
            warnings.warn(
                f"Value of entry '{key}' holds line breaks, surrounding quotes or"
                " excess whitespace and won't be read back identically.",
                RoundTripWarning,
                stacklevel=2,
            )
        return f"{key} {ASSIGN_MARKER} {value}"
