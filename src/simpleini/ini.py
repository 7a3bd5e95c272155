"""The Ini document: a default section plus uniquely named sections, read from and
written to ini files or streams."""

from os import PathLike
from pathlib import Path
from typing import IO, Any, Iterator
import io
import logging
import re
from .args import Options
from .exceptions_warnings import EntityNotFound, InvalidIniFileError
from .globals import ACCEPTED_EXTENSIONS, DEFAULT_SECTION_NAME, LINE_BREAK_REGEX
from .interface import Section
from .reader import _ReadIni, decode_bytes
from .writer import _WriteIni

logger = logging.getLogger(__name__)

type Source = str | PathLike[str] | IO[str] | IO[bytes]
"""A path to an ini file or a (text or binary) stream."""


class Ini:
    """Ini document. Always holds the default section (entries before the first
    section header), which can't be removed."""

    def __init__(self, options: Options | None = None) -> None:
        """
        Args:
            options (Options | None, optional): Options for reading and writing.
                If None, will use Options() (no attributes, no multiline values).
                Defaults to None.
        """
        self.options = Options() if options is None else options
        self._default_section = Section(DEFAULT_SECTION_NAME)
        self._sections: list[Section] = [self._default_section]

    # ---------- #
    # sections
    # ---------- #

    @property
    def default_section(self) -> Section:
        return self._default_section

    def size(self) -> int:
        """Number of sections including the default section."""
        return len(self._sections)

    def real_size(self) -> int:
        """Number of sections without the default section."""
        return max(self.size() - 1, 0)

    def is_empty(self) -> bool:
        """Whether there is no section besides the default section."""
        return self.size() < 2

    def section_exists(self, name: str) -> bool:
        return self.get_section(name) is not None

    def get_section(self, name: str) -> Section | None:
        """Get a section by its exact name.

        Args:
            name (str): The section name.

        Returns:
            Section | None: The section or None if no section has that name.
        """
        return next((sec for sec in self._sections if sec.name == name), None)

    def get_section_or_default(self, name: str) -> Section:
        """Get a section by its exact name or the default section if it doesn't
        exist."""
        section = self.get_section(name)
        return self._default_section if section is None else section

    def get_sections(self) -> tuple[Section, ...]:
        """All sections, default section included."""
        return tuple(self._sections)

    def put(self, section: Section) -> None:
        """Add a section, replacing the section with the same name. A section named
        like the default section is merged into the default section.

        Args:
            section (Section): The section to add.
        """
        if section is self._default_section:
            return
        if section.name == self._default_section.name:
            self._default_section.put_all(section)
            self._default_section.set_attributes(section.attributes)
            return
        for i, sec in enumerate(self._sections):
            if sec.name == section.name:
                self._sections[i] = section
                return
        self._sections.append(section)

    def put_all(self, *sections: Section) -> None:
        for section in sections:
            self.put(section)

    def remove(self, name: str) -> None:
        """Remove a section. Removing the default section is silently ignored.

        Args:
            name (str): Name of the section (leading and trailing whitespace is
                ignored).
        """
        name = name.strip()
        if name == self._default_section.name:
            return
        self._sections = [
            sec
            for sec in self._sections
            if sec is self._default_section or sec.name != name
        ]

    def remove_all(self, *names: str) -> None:
        for name in names:
            self.remove(name)

    def accepted_extensions(self) -> tuple[str, ...]:
        return ACCEPTED_EXTENSIONS

    # ---------- #
    # reading
    # ---------- #

    def load(
        self, source: Source, options: Options | None = None, close: bool = False
    ) -> None:
        """Read ini content into this document. Existing sections with the same name
        are replaced, entries of the default section are updated.

        Args:
            source (Source): Path to an ini file or a text or binary stream. Files and
                binary streams are decoded with the best fitting encoding.
            options (Options | None, optional): Options to read with. Will replace the
                document's options. If None, the document's options are used.
                Defaults to None.
            close (bool, optional): Whether to close a passed stream after reading.
                Paths are always closed. Defaults to False.

        Raises:
            InvalidIniFileError: If source is a directory, has no accepted extension
                or can't be decoded.
            OSError: If source can't be read.
        """
        if options is not None:
            self.options = options

        if isinstance(source, (str, PathLike)):
            text = self._read_path(Path(source))
        else:
            try:
                text = source.read()
            finally:
                if close:
                    source.close()
            if isinstance(text, bytes):
                text = decode_bytes(text)

        self._parse(text)

    def loads(self, text: str, options: Options | None = None) -> None:
        """Read ini content from a string. See load."""
        if options is not None:
            self.options = options
        self._parse(text)

    def _read_path(self, path: Path) -> str:
        if path.is_dir():
            raise InvalidIniFileError(f"Invalid regular file. Directory given: {path}")
        if path.suffix[1:] not in self.accepted_extensions():
            raise InvalidIniFileError(
                f"Invalid file extension of {path}. Only"
                f" {', '.join(self.accepted_extensions())} accepted."
            )
        return decode_bytes(path.read_bytes())

    def _parse(self, text: str) -> None:
        _ReadIni(self, re.split(LINE_BREAK_REGEX, text)).process_all()
        logger.debug("Read %d section(s) with %s.", self.real_size(), self.options)

    # ---------- #
    # writing
    # ---------- #

    def store(self, target: str | PathLike[str] | IO[Any], close: bool = False) -> None:
        """Write this document as ini content.

        Args:
            target (str | PathLike[str] | IO[Any]): Path to write to (created or
                truncated, UTF-8) or a text or binary stream (UTF-8).
            close (bool, optional): Whether to close a passed stream after writing.
                Paths are always closed. Defaults to False.

        Raises:
            OSError: If writing fails. Content written up to that point is kept.
        """
        writer = _WriteIni(self)
        if isinstance(target, (str, PathLike)):
            with open(target, "w", encoding="utf-8") as f:
                writer.store_all(f)
            return

        try:
            if isinstance(target, (io.RawIOBase, io.BufferedIOBase)) or "b" in getattr(
                target, "mode", ""
            ):
                target.write(writer.to_string().encode("utf-8"))
                target.flush()
            else:
                writer.store_all(target)
        finally:
            if close:
                target.close()

    def dumps(self) -> str:
        """Serialize this document to a string."""
        return _WriteIni(self).to_string()

    # ---------- #
    # dunder
    # ---------- #

    def __getitem__(self, name: str) -> Section:
        section = self.get_section(name)
        if section is None:
            raise EntityNotFound(name)
        return section

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.section_exists(name)

    def __iter__(self) -> Iterator[Section]:
        return iter(tuple(self._sections))

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"Ini(options={self.options!r}, sections={[s.name for s in self._sections]!r})"
