DEFAULT_SECTION_NAME = "Default"
"""Name of the implicit section holding entries that precede any section header."""
COMMENT_PREFIX = ";"
ASSIGN_MARKER = "="
SECTION_WRAPPERS = ("[", "]")
ACCEPTED_EXTENSIONS = ("ini",)
"""File extensions (without dot) accepted when loading from a path."""

# grammar
ENTRY_REGEX = r"([A-Za-z_][\w/]*)\s?=\s?(.*)"
"""Key followed by the assign marker (optionally padded by one whitespace each side)
and the raw value."""
ATTRIBUTE_REGEX = r'(\w+)=("(.*?)"|(\d+\.?\d*))'
"""Section attribute, either key="quoted value" or key=number."""
NUMBER_REGEX = r"\d+(\.\d+)?"
"""Attribute values matching this are written without quotes."""
LINE_BREAK_REGEX = r"\r\n|\r|\n"
"""Line terminators of ini content. Other unicode line boundaries stay part of the
line."""
