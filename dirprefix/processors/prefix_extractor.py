"""Derive a filename prefix from a directory name."""

import os
import re
from pathlib import Path


# Used in place of an empty pattern so the whole name becomes the prefix
MATCH_ALL = ".*"


def get_dirname(path: str | os.PathLike) -> str:
    """Return the final component of `path`.

    Args:
        path: Target directory path. A trailing separator is ignored.

    Returns:
        The directory base name.

    Raises:
        ValueError: If the path has no final name component (empty, ".", a root or ending in "..").
    """
    name = Path(path).name
    if not name or name == "..":
        raise ValueError(f"{os.fspath(path)!r} has no directory name")
    return name


def get_prefix(pattern: str, name: str) -> str:
    """Extract a prefix from `name` using a regular expression.

    An empty pattern matches everything, so the whole name is returned.
    Otherwise the leftmost match of `pattern` is returned, or an empty string
    when the pattern does not match anywhere in `name`.

    Args:
        pattern: Regular expression, or "" for the full name.
        name: Directory name to search.

    Returns:
        The matched substring (group 0).

    Raises:
        re.error: If the pattern is not a valid regular expression.
    """
    regex = re.compile(pattern or MATCH_ALL)
    match = regex.search(name)
    return match.group(0) if match else ""
