"""Sections hold the entries of an ini document. Attributes of a section header are
held by a SectionAttributes container that supports the entry operations only."""

from typing import Any, Iterable, Iterator, Mapping, Self
import weakref
from .exceptions_warnings import EntityNotFound, UnsupportedOperationError
from .entities import EntryKey, EntryValue
from .type_converters.converters import (
    DEFAULT_BOOL_CONVERTER,
    DEFAULT_INT_CONVERTER,
    DEFAULT_LIST_CONVERTER,
    DEFAULT_NUMERIC_CONVERTER,
    DEFAULT_SET_CONVERTER,
    list_converter,
    set_converter,
)
from .utils import valid_name


class _EntryContainer:
    """Insertion ordered key/value store shared by sections and attributes.

    Keys are normalized when stored (see utils.valid_name) but looked up literally,
    so an entry put as "My Key" is stored (and has to be accessed) as "My-Key".
    """

    def __init__(self) -> None:
        self._entries: dict[EntryKey, EntryValue] = {}

    # ---------- #
    # modification
    # ---------- #

    def put(self, key: str, value: Any) -> EntryValue | None:
        """Insert or overwrite an entry.

        Args:
            key (str): The entry key. Will be trimmed and whitespace runs
                replaced by a hyphen.
            value (Any): The entry value. Stored as string, None as empty string.

        Returns:
            EntryValue | None: The previous value or None if there was none or the
                normalized key is blank (in which case nothing is stored).
        """
        real_key = valid_name(key)
        if not real_key:
            return None
        previous = self._entries.get(real_key)
        self._entries[real_key] = "" if value is None else str(value)
        return previous

    def put_all(self, items: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> None:
        """Put multiple entries.

        Args:
            items (Mapping[str, Any] | Iterable[tuple[str, Any]]): Mapping or
                key/value pairs to put.
        """
        if isinstance(items, (Mapping, _EntryContainer)):
            items = items.items()
        for key, value in items:
            self.put(key, value)

    def remove(self, key: str) -> EntryValue | None:
        """Remove an entry.

        Returns:
            EntryValue | None: The removed value or None if the key didn't exist.
        """
        return self._entries.pop(key, None)

    def remove_all(self, *keys: str) -> None:
        for key in keys:
            self.remove(key)

    def clear(self) -> None:
        self._entries.clear()

    # ---------- #
    # access
    # ---------- #

    def get(self, key: str, default: EntryValue | None = None) -> EntryValue | None:
        return self._entries.get(key, default)

    def get_or_default(self, key: str, default: EntryValue) -> EntryValue:
        return self._entries.get(key, default)

    def contains_key(self, key: str) -> bool:
        return key in self._entries

    def size(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def keys(self) -> list[EntryKey]:
        return list(self._entries.keys())

    def values(self) -> list[EntryValue]:
        return list(self._entries.values())

    def items(self) -> list[tuple[EntryKey, EntryValue]]:
        return list(self._entries.items())

    # ---------- #
    # conversion
    # ---------- #

    def get_as_boolean(self, key: str) -> bool | None:
        """Get an entry as bool. "true", "1", "yes" and "y" are True, "false", "0",
        "no" and "n" are False (case-insensitive).

        Returns:
            bool | None: The converted value or None if the entry is missing or no
                boolean.
        """
        return DEFAULT_BOOL_CONVERTER(self.get(key))

    def get_as_boolean_or_default(self, key: str, default: bool) -> bool:
        result = self.get_as_boolean(key)
        return default if result is None else result

    def get_as_number(self, key: str) -> float | None:
        """Get an entry as number (parsed as float).

        Returns:
            float | None: The converted value or None if the entry is missing or no
                number.
        """
        return DEFAULT_NUMERIC_CONVERTER(self.get(key))

    def get_as_number_or_default(self, key: str, default: float) -> float:
        result = self.get_as_number(key)
        return default if result is None else result

    def get_as_int(self, key: str) -> int | None:
        """Get an entry as number truncated to int (e.g. "2.9" -> 2)."""
        return DEFAULT_INT_CONVERTER(self.get(key))

    def get_as_float(self, key: str) -> float | None:
        return self.get_as_number(key)

    def get_as_list(self, key: str, separator: str = ",") -> list[str]:
        """Get an entry split into a list.

        Args:
            key (str): The entry key.
            separator (str, optional): Regular expression separating the items.
                Defaults to ",".

        Returns:
            list[str]: The stripped items without trailing empty ones. Empty if the
                entry is missing or the separator is no valid pattern.
        """
        to_list = (
            DEFAULT_LIST_CONVERTER if separator == "," else list_converter(separator)
        )
        return to_list(self.get(key)) or []

    def get_as_set(self, key: str, separator: str = ",") -> set[str]:
        """Same as get_as_list but returns a set."""
        to_set = DEFAULT_SET_CONVERTER if separator == "," else set_converter(separator)
        return to_set(self.get(key)) or set()

    # ---------- #
    # dunder
    # ---------- #

    def __getitem__(self, key: str) -> EntryValue:
        try:
            return self._entries[key]
        except KeyError:
            raise EntityNotFound(key) from None

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        if self.remove(key) is None:
            raise EntityNotFound(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[EntryKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class SectionAttributes(_EntryContainer):
    """Attributes of a section header (e.g. [section key="value" count=5]).
    Supports entry operations only, asking for a name or default section raises
    UnsupportedOperationError."""

    @property
    def name(self) -> str:
        raise UnsupportedOperationError("Section attributes have no name.")

    @name.setter
    def name(self, value: str) -> None:
        raise UnsupportedOperationError("Section attributes have no name.")

    @property
    def default_section(self) -> "Section | None":
        raise UnsupportedOperationError("Section attributes have no default section.")

    def set_default_section(self, section: "Section | None") -> "Section | None":
        raise UnsupportedOperationError("Section attributes have no default section.")

    def __repr__(self) -> str:
        return f"SectionAttributes({self._entries!r})"


class Section(_EntryContainer):
    """A configuration section. Holds entries and, optionally, attributes of the
    section header."""

    def __init__(self, name: str, default_section: Self | None = None) -> None:
        """
        Args:
            name (str): Name of the section. Will be trimmed and whitespace runs
                replaced by a hyphen.
            default_section (Section | None, optional): Section to use as fallback.
                Only kept as a weak reference and never consulted by lookups.
                Defaults to None.
        """
        super().__init__()
        self._name = valid_name(name)
        self._default_section: weakref.ref[Section] | None = None
        self._attributes = SectionAttributes()
        self.set_default_section(default_section)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = valid_name(value)

    @property
    def default_section(self) -> "Section | None":
        """The fallback section or None if none is set (or it no longer exists)."""
        return None if self._default_section is None else self._default_section()

    @default_section.setter
    def default_section(self, section: "Section | None") -> None:
        self.set_default_section(section)

    def set_default_section(self, section: "Section | None") -> "Section | None":
        """Set the fallback section.

        Args:
            section (Section | None): The new fallback section.

        Returns:
            Section | None: The previous fallback section.
        """
        previous = self.default_section
        self._default_section = None if section is None else weakref.ref(section)
        return previous

    # ---------- #
    # attributes
    # ---------- #

    @property
    def attributes(self) -> SectionAttributes:
        return self._attributes

    @property
    def has_attributes(self) -> bool:
        return not self._attributes.is_empty()

    def get_attributes(self) -> SectionAttributes:
        return self._attributes

    def set_attribute(self, key: str, value: Any) -> EntryValue | None:
        """Set an attribute. Same semantics as put.

        Returns:
            EntryValue | None: The previous attribute value.
        """
        return self._attributes.put(key, value)

    def set_attributes(
        self, attributes: Mapping[str, Any] | Iterable[tuple[str, Any]]
    ) -> None:
        """Set multiple attributes (merged into the existing ones)."""
        self._attributes.put_all(attributes)

    def remove_attribute(self, key: str) -> EntryValue | None:
        return self._attributes.remove(key)

    def clear_attributes(self) -> None:
        self._attributes.clear()

    def __repr__(self) -> str:
        return (
            f"Section(name={self._name!r}, entries={self._entries!r},"
            f" attributes={self._attributes._entries!r})"
        )
