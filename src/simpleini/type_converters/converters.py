"""Converter classes and functions."""

from functools import wraps
from typing import Callable
import math
import re
from ..exceptions_warnings import WrongType

type Numerics = int | float
"""Possible numeric conversion result types."""

type TypeConverter[ConvertedType] = Callable[[str], ConvertedType | None]
"""Type of type converter functions. To create a type converter, use converter decorator."""


def converter[T](processor: Callable[[str], T]) -> TypeConverter[T]:
    """Create a new TypeConverter.

    Args:
        processor (Callable[[str], T]): Callable to process the string input and
            convert it into an instance of arbitrary type. If conversion is not
            possible, should raise exceptions_warnings.WrongType.

    Returns:
        TypeConverter[T]: TypeConverter that will return the processed input on call
            or None if conversion was not possible.
    """

    @wraps(processor)
    def convert(value: str | None) -> T | None:
        """Convert value.

        Args:
            value (str | None): The value to convert.

        Returns:
            T | None: The converted value or None if conversion was impossible.
        """
        if not isinstance(value, str):
            return None
        try:
            return processor(value)
        except WrongType:
            return None

    return convert


def bool_converter(
    true: str | tuple[str, ...] = ("true", "1", "yes", "y"),
    false: str | tuple[str, ...] = ("false", "0", "no", "n"),
) -> TypeConverter[bool]:
    """Create a new bool converter.

    Args:
        true (str | tuple[str, ...], optional): String(s) that should be regarded as True.
            Defaults to ("true", "1", "yes", "y").
        false (str | tuple[str, ...], optional): String(s) that should be regarded as
            False. Defaults to ("false", "0", "no", "n").

    Returns:
        TypeConverter[bool]: The bool converter.
    """

    if not isinstance(true, tuple):
        true = (true,)
    true = tuple(i.lower() for i in true)

    if not isinstance(false, tuple):
        false = (false,)
    false = tuple(i.lower() for i in false)

    @converter
    def to_bool(string: str) -> bool:
        """Converts a string to bool.

        Args:
            string (str): The string to convert.

        Raises:
            WrongType: If conversion was unsuccessful.

        Returns:
            bool: The converted boolean.
        """
        string = string.lower().strip()
        if string in true:
            return True
        elif string in false:
            return False
        raise WrongType

    return to_bool


def numeric_converter[T: Numerics](numeric_type: type[T] = float) -> TypeConverter[T]:
    """Create a new numeric type converter. The string is always parsed as a float
    first, other numeric types are narrowed from that float (int truncates towards
    zero).

    Args:
        numeric_type (type[Numerics], optional): The type to convert to.
            Defaults to float.

    Returns:
        TypeConverter[Numerics]: The numeric type converter.
    """

    @converter
    def to_num(string: str) -> T:
        """Convert string to numeric type.

        Args:
            string (str): The string to convert.

        Raises:
            WrongType: If conversion was unsuccessful.

        Returns:
            Numerics: Converted string.
        """
        try:
            number = float(string.strip())
        except ValueError:
            raise WrongType from None
        if numeric_type is float:
            return number
        if not math.isfinite(number):
            raise WrongType
        return numeric_type(number)

    return to_num


def list_converter(separator: str = ",") -> TypeConverter[list[str]]:
    """Create a new list type converter.

    Args:
        separator (str, optional): Regular expression that separates list items.
            Defaults to ",".

    Returns:
        TypeConverter[list[str]]: The new list type converter. Items are stripped of
            whitespace, trailing empty items are dropped ("a,b," -> ["a", "b"]).
            Returns an empty list for empty strings or an invalid separator
            pattern.
    """

    @converter
    def to_list(string: str) -> list[str]:
        """Convert a string to a list.

        Args:
            string (str): The string to convert.

        Returns:
            list[str]: Converted list.
        """
        string = string.strip()
        if not string:
            return []
        try:
            items = re.split(separator, string)
        except (re.error, TypeError, RecursionError):
            return []
        # trailing empty fragments are no items
        while items and not items[-1]:
            items.pop()
        return [item.strip() for item in items]

    return to_list


def set_converter(separator: str = ",") -> TypeConverter[set[str]]:
    """Create a new set type converter. Works like list_converter but drops
    duplicate items."""
    to_list = list_converter(separator)

    @converter
    def to_set(string: str) -> set[str]:
        return set(to_list(string) or ())

    return to_set


# default converters
DEFAULT_BOOL_CONVERTER = bool_converter()
"""Bool converter with default conversion parameters."""
DEFAULT_NUMERIC_CONVERTER = numeric_converter()
"""Numeric (float) converter."""
DEFAULT_INT_CONVERTER = numeric_converter(int)
"""Numeric converter narrowing to int."""
DEFAULT_LIST_CONVERTER = list_converter()
"""List converter splitting by commas."""
DEFAULT_SET_CONVERTER = set_converter()
"""Set converter splitting by commas."""
