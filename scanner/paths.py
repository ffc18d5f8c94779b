"""Path string helpers shared by the parser and the resolver."""

import os
import re
from typing import List

# Segments that say where a path is anchored rather than what it names
ANCHOR_SEGMENT = re.compile(r"^(?:\.\.|~|[A-Za-z]:)$")

SEGMENT_SEPARATOR = re.compile(r"[\\/]+")


def normalize_path(path: str) -> str:
    """
    Normalize a path string as it was written in the source text.

    Strips leading ``./`` and collapses ``/./`` to ``/`` until nothing
    changes. ``../`` segments, case, trailing slashes, drive letters and
    backslashes are left alone.

    Args:
        path: Raw path text.

    Returns:
        The normalized path text.
    """
    while path.startswith("./"):
        path = path[2:]
    # replace() skips overlapping hits such as "/././"
    while "/./" in path:
        path = path.replace("/./", "/")
    return path


def split_segments(path: str) -> List[str]:
    """Split on both separator styles, dropping empty and ``.`` segments."""
    return [seg for seg in SEGMENT_SEPARATOR.split(path) if seg and seg != "."]


def search_suffix(path: str, depth: int = 3) -> str:
    """
    Build the trailing fragment used to search for a path.

    Takes up to ``depth`` segments from the end, stopping early at an
    anchor segment (``..``, ``~`` or a drive letter).

    Returns:
        The segments joined with ``/``, or an empty string.
    """
    tail: List[str] = []
    for segment in reversed(split_segments(path)):
        if len(tail) >= depth or ANCHOR_SEGMENT.match(segment):
            break
        tail.append(segment)
    return "/".join(reversed(tail))


def expand_path(path: str) -> str:
    """Expand a leading ``~`` to the user's home directory."""
    return os.path.expanduser(path)


def is_absolute(path: str) -> bool:
    """Check whether a path is absolute on this host once ``~`` is expanded."""
    return os.path.isabs(expand_path(path))
