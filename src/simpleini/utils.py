import re

_WHITESPACE = re.compile(r"\s+")


def valid_name(name: str) -> str:
    """Normalize a section name or entry key.

    Args:
        name (str): The name to normalize.

    Returns:
        str: The name trimmed and with whitespace runs replaced by a hyphen.
    """
    return _WHITESPACE.sub("-", str(name).strip())


def clean_multiple_space(content: str) -> str:
    """Trim content and collapse whitespace runs to a single space."""
    return _WHITESPACE.sub(" ", content.strip())


def clean_string_content(content: str) -> str:
    """Trim and collapse whitespace of content and strip one pair of surrounding
    double quotes.

    Args:
        content (str): The content to clean.

    Returns:
        str: The cleaned content.
    """
    content = clean_multiple_space(content)
    if len(content) >= 2 and content.startswith('"') and content.endswith('"'):
        return content[1:-1]
    return content
