"""File system utilities for open-current-activity."""

import os
import re
from collections.abc import Iterable
from pathlib import Path

PROPERTIES_ENCODING = "latin-1"

# \uXXXX, a named escape such as \t, any other escaped character, or a
# trailing backslash (a line continuation, dropped)
_PROPERTY_ESCAPE = re.compile(r"\\(u[0-9a-fA-F]{4}|.|$)")
_PROPERTY_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def dir_exists(path: Path) -> bool:
    """Check if a directory exists.

    Args:
        path: Directory path to check

    Returns:
        True if path exists and is a directory
    """
    return path.exists() and path.is_dir()


def find_files_by_name(
    root: Path, file_name: str, skip_directories: Iterable[str] = ()
) -> list[Path]:
    """Find every file below root with exactly the given name.

    Args:
        root: Directory to search recursively
        file_name: File name to match (case-sensitive)
        skip_directories: Directory names whose subtrees are not searched

    Returns:
        Matching paths, sorted for stable output
    """
    skipped = set(skip_directories)
    matches: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Prune in place so os.walk never descends into skipped trees
        dirnames[:] = [d for d in dirnames if d not in skipped]
        if file_name in filenames:
            matches.append(Path(dirpath) / file_name)
    return sorted(matches)


def read_properties(path: Path) -> dict[str, str]:
    """Read a Java .properties file into a dictionary.

    Handles ``key=value`` and ``key:value`` lines, ``#``/``!`` comments and
    backslash escapes (``C\\:\\\\Android`` becomes ``C:\\Android``, ``\\u00e9``
    becomes U+00E9).
    Continuation lines are not supported.

    Args:
        path: Properties file to read

    Returns:
        Parsed key/value pairs (empty if the file does not exist)
    """
    if not path.is_file():
        return {}

    properties: dict[str, str] = {}
    # .properties files are ISO-8859-1; other characters come as \uXXXX escapes
    for raw_line in path.read_text(encoding=PROPERTIES_ENCODING).splitlines():
        line = raw_line.strip()
        if not line or line[0] in "#!":
            continue
        separators = [i for i in (line.find("="), line.find(":")) if i != -1]
        if not separators:
            continue
        index = min(separators)
        key = line[:index].strip()
        value = line[index + 1 :].strip()
        properties[key] = _unescape_property(value)
    return properties


def _unescape_property(value: str) -> str:
    """Resolve the backslash escapes of a property value."""
    return _PROPERTY_ESCAPE.sub(_replace_escape, value)


def _replace_escape(match: re.Match[str]) -> str:
    escape = match.group(1)
    if len(escape) == 5:
        return chr(int(escape[1:], 16))
    return _PROPERTY_ESCAPES.get(escape, escape)
