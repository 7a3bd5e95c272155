from .ini import Ini
from .interface import Section, SectionAttributes
from .args import Options, OptionsBuilder
from .exceptions_warnings import (
    EntityNotFound,
    InvalidIniFileError,
    IniStructureWarning,
    RoundTripWarning,
    UnsupportedOperationError,
)
from .globals import DEFAULT_SECTION_NAME
