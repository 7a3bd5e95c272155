"""simpleini-specific exceptions and warnings"""

# ---------- #
# Exceptions
# ---------- #


class InvalidIniFileError(OSError):
    """Raised when a file can't be loaded as an ini (directory, wrong extension or
    undecodable content)."""


class UnsupportedOperationError(Exception):
    """Raised when an attribute container is used like a full section."""


class EntityNotFound(KeyError):
    """Raised when an entry or section was to be accessed but doesn't exist."""


class WrongType(Exception):
    """Raised by type converters when a string can't be converted."""


# ---------- #
# Warnings
# ---------- #


class IniStructureWarning(Warning):
    """Raised when content violates the ini structure."""


class RoundTripWarning(IniStructureWarning):
    """Raised when written content will not be read back identically."""
