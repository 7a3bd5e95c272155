from dataclasses import dataclass, replace
from typing import Self


@dataclass(frozen=True, slots=True)
class Options:
    """Options for reading and writing.

    Args:
        advanced (bool, optional): Whether section attributes
            (e.g. [section key="value" count=5]) are read and written.
            Defaults to False.
        multiline (bool, optional): Whether lines that are neither comment, section
            header nor entry continue the value of the last entry. If False, such
            lines are ignored. Defaults to False.
    """

    advanced: bool = False
    multiline: bool = False

    def update(self, **kwargs) -> Self:
        """Create a copy with updated options.

        Args:
            **kwargs: Keyword-arguments to update the options with.

        Returns:
            Options: The updated copy.
        """
        return replace(self, **kwargs)

    @classmethod
    def builder(cls) -> "OptionsBuilder":
        """Create a builder to assemble options step by step."""
        return OptionsBuilder()


class OptionsBuilder:
    """Fluent builder for Options."""

    def __init__(self) -> None:
        self._advanced = False
        self._multiline = False

    def set_advanced(self, status: bool) -> Self:
        self._advanced = status
        return self

    def set_multiline(self, status: bool) -> Self:
        self._multiline = status
        return self

    def build(self) -> Options:
        return Options(advanced=self._advanced, multiline=self._multiline)
