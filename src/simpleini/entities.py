"""Ini entities are either a section header, an entry or a comment. Functions in
here classify a single line and extract the header or entry it holds."""

from dataclasses import dataclass, field
import re
from .globals import (
    ATTRIBUTE_REGEX,
    COMMENT_PREFIX,
    ENTRY_REGEX,
    SECTION_WRAPPERS,
)
from .utils import clean_multiple_space, clean_string_content

ENTRY_PATTERN = re.compile(ENTRY_REGEX, re.ASCII)
ATTRIBUTE_PATTERN = re.compile(ATTRIBUTE_REGEX, re.ASCII)

type EntryKey = str
"""An entry's key."""
type EntryValue = str
"""An entry's value."""


@dataclass(slots=True)
class SectionInfo:
    """Content of a section header.

    Args:
        name (str): The section name. Empty if the header holds no name.
        attributes (dict[str, str]): The header's attributes in order of appearance.
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """Whether the header holds a section name."""
        return bool(self.name.strip())


@dataclass(slots=True)
class EntryInfo:
    """Key and value of an entry line."""

    key: EntryKey
    value: EntryValue


def is_invalid_content(line: str) -> bool:
    """Check whether a line is a comment or blank and has to be skipped.

    Args:
        line (str): The line to check.

    Returns:
        bool: True if the line is blank or starts with the comment prefix.
    """
    line = line.strip()
    return not line or line.startswith(COMMENT_PREFIX)


def is_valid_section(line: str) -> bool:
    """Check whether a line is a section header ([name ...]) with non-blank content.

    Args:
        line (str): The line to check.

    Returns:
        bool: Whether the line is a section header.
    """
    line = line.strip()
    opening, closing = SECTION_WRAPPERS
    if not line.startswith(opening):
        return False
    line = line[len(opening) :]
    if not line.endswith(closing):
        return False
    return bool(line[: -len(closing)].strip())


def is_valid_entry(line: str) -> bool:
    """Check whether a line is an entry (key = value).

    Args:
        line (str): The line to check.

    Returns:
        bool: Whether the line is an entry.
    """
    return ENTRY_PATTERN.fullmatch(line.strip()) is not None


def get_section_info(line: str) -> SectionInfo:
    """Extract name and attributes of a section header. The line must have been
    validated with is_valid_section.

    The name is the first fragment of the header that is not an attribute, e.g.
    '[server host="localhost" port=8080]' yields the name 'server' and the
    attributes {"host": "localhost", "port": "8080"}.

    Args:
        line (str): The section header.

    Returns:
        SectionInfo: The extracted name and attributes. The name is empty if the
            header only holds attributes.
    """
    opening, closing = SECTION_WRAPPERS
    content = clean_multiple_space(line.strip()[len(opening) : -len(closing)])

    attributes: dict[str, str] = {}
    for match in ATTRIBUTE_PATTERN.finditer(content):
        attributes[match[1]] = clean_string_content(match[2])

    # whitespace is collapsed, so newlines can delimit the remaining fragments
    fragments = ATTRIBUTE_PATTERN.sub("\n", content).split("\n")
    name = next((frag.strip() for frag in fragments if frag.strip()), "")

    return SectionInfo(name=name, attributes=attributes)


def get_entry_info(line: str) -> EntryInfo | None:
    """Extract key and value of an entry. Surrounding double quotes are removed
    from both.

    Args:
        line (str): The entry line.

    Returns:
        EntryInfo | None: The extracted entry or None if the line is no entry.
    """
    match = ENTRY_PATTERN.fullmatch(clean_multiple_space(line))
    if match is None:
        return None
    return EntryInfo(
        key=clean_string_content(match[1]),
        value=clean_string_content(match[2]),
    )
