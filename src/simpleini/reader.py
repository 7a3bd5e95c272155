"""Reading ini content into an Ini document."""

from typing import TYPE_CHECKING, Iterable
import logging
from charset_normalizer import from_bytes as read_from_bytes
from .args import Options
from .entities import (
    EntryInfo,
    SectionInfo,
    get_entry_info,
    get_section_info,
    is_invalid_content,
    is_valid_entry,
    is_valid_section,
)
from .exceptions_warnings import InvalidIniFileError
from .interface import Section
from .utils import clean_string_content

if TYPE_CHECKING:
    from .ini import Ini

logger = logging.getLogger(__name__)


def decode_bytes(raw: bytes) -> str:
    """Decode ini content of unknown encoding.

    Args:
        raw (bytes): The raw content.

    Raises:
        InvalidIniFileError: If no encoding fits the content.

    Returns:
        str: The decoded content.
    """
    if not raw:
        return ""
    best = read_from_bytes(raw).best()
    if best is None:
        raise InvalidIniFileError("Content could not be decoded as text.")
    logger.debug("Decoding ini content as %s.", best.encoding)
    return str(best)


class _ReadIni:
    """Reads lines into target, one instance per read. For more info cf. Ini.load."""

    def __init__(self, target: "Ini", lines: Iterable[str]) -> None:
        self.target = target
        self.lines = lines
        self.options: Options = target.options

        # ----
        # define variables for read process
        # ----
        self.current_section: Section = target.default_section
        self.last_entry_key: str | None = None
        """Key of the entry added last, continuations are added to it."""
        self.content_buffer: list[str] = []
        """Continuation lines not yet added to the last entry."""
        self.current_line_index: int = 0
        """Line number (1-based) of the line being processed."""
        # ----

    def process_all(self) -> None:
        """Process every line, then add a possibly remaining continuation."""
        for self.current_line_index, line in enumerate(self.lines, 1):
            self._process_line(line)
        self._flush_buffer()

    def _process_line(self, line: str) -> None:
        # continuation(s) of the previous line belong to the last entry
        self._flush_buffer()

        if is_invalid_content(line):
            return

        line = line.strip()
        if is_valid_section(line):
            self._handle_section(get_section_info(line))
        elif is_valid_entry(line):
            self._handle_entry(get_entry_info(line))
        elif self.options.multiline:
            self.content_buffer.append(line)
        else:
            logger.debug(
                "Line %d is being ignored because it's invalid.",
                self.current_line_index,
            )

    def _flush_buffer(self) -> None:
        """Append buffered continuations to the value of the last entry if that entry
        exists in the current section."""
        if (
            not self.content_buffer
            or self.last_entry_key is None
            or not self.current_section.contains_key(self.last_entry_key)
        ):
            return

        previous = self.current_section.get_or_default(self.last_entry_key, "")
        continuation = " ".join(self.content_buffer)
        self.current_section.put(
            self.last_entry_key,
            clean_string_content(f"{previous.strip()} {continuation.strip()}"),
        )
        self.content_buffer.clear()

    def _handle_section(self, section_info: SectionInfo) -> None:
        """Add a new section and make it the current one."""
        if not section_info.is_valid:
            logger.debug(
                "Line %d is being ignored because the section header has no name.",
                self.current_line_index,
            )
            return

        section = Section(section_info.name, self.target.default_section)
        if self.options.advanced:
            section.set_attributes(section_info.attributes)

        self.target.put(section)
        # sections named like the default section are merged into it
        self.current_section = self.target.get_section_or_default(section.name)

    def _handle_entry(self, entry_info: EntryInfo | None) -> None:
        """Add an entry to the current section."""
        if entry_info is None:
            return
        self.current_section.put(entry_info.key, entry_info.value)
        self.last_entry_key = entry_info.key
