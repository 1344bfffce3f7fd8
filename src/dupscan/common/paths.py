"""Resolution of user-supplied scan roots."""

from pathlib import Path

from .exceptions import InvalidRootError

_QUOTES = ("'", '"')


def strip_quotes(text: str) -> str:
    """Remove surrounding whitespace and one pair of matching quotes.

    Paths pasted from a file manager often arrive wrapped in quotes.
    """
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in _QUOTES:
        text = text[1:-1].strip()
    return text


def resolve_root(text: str) -> Path:
    """Turn free-form input into a validated directory path.

    Args:
        text: Path as typed by the user

    Returns:
        Absolute path to an existing directory

    Raises:
        InvalidRootError: If the path is empty, missing or not a directory
    """
    cleaned = strip_quotes(text)
    if not cleaned:
        raise InvalidRootError("No directory given")

    root = Path(cleaned).expanduser()
    if not root.exists():
        raise InvalidRootError(f"Path does not exist: {root}")
    if not root.is_dir():
        raise InvalidRootError(f"Not a directory: {root}")

    return root.resolve()
