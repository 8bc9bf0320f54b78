"""Result types for commands and services.

TypedDict definitions for results that are passed around as plain
dictionaries, giving type-safe access with IDE autocompletion.
"""

from pathlib import Path
from typing import TypedDict


class OpenResult(TypedDict):
    """What the source opener did for one resolved activity.

    An empty ``matches`` list means no source file was found.
    """

    activity: str
    file_names: list[str]
    matches: list[Path]
    opened: bool
