"""Title policy shared by every route that accepts a page title.

A title is one or more ASCII letters or digits. Nothing else is allowed,
so a valid title always maps to a file directly inside the notes root.
"""

import re

from quicknotes.core.errors import EmptyTitleError, InvalidTitleError

TITLE_PATTERN = re.compile(r"[A-Za-z0-9]+")
PATH_PATTERN = re.compile(r"/(view|edit|save)/([A-Za-z0-9]+)")


def match_path(path: str) -> tuple[str, str] | None:
    """Split ``/<action>/<title>`` into its parts.

    Returns (action, title), or None when the path does not match.
    """
    match = PATH_PATTERN.fullmatch(path)
    if match is None:
        return None
    return match.group(1), match.group(2)


def is_valid_title(title: str) -> bool:
    return TITLE_PATTERN.fullmatch(title) is not None


def validate_title(raw: str) -> str:
    """Trim a submitted title and check it against the policy."""
    title = raw.strip()
    if not title:
        raise EmptyTitleError()
    if not is_valid_title(title):
        raise InvalidTitleError(title)
    return title
