"""Stripping of configured path prefixes (build roots, container mounts, ...)."""

from typing import Any, Iterable, List, Sequence, Tuple


def clean_prefixes(raw: Any) -> Tuple[List[str], List[Any]]:
    """
    Split a configured prefix list into usable and rejected entries.

    Anything that is not a non-empty string is rejected. A value that is
    not a list at all is rejected as a whole.

    Args:
        raw: The configured value, usually a list of strings.

    Returns:
        Tuple of (valid prefixes in their original order, rejected entries).
    """
    if raw is None:
        return [], []
    if not isinstance(raw, (list, tuple)):
        return [], [raw]

    valid: List[str] = []
    rejected: List[Any] = []
    for entry in raw:
        if isinstance(entry, str) and entry:
            valid.append(entry)
        else:
            rejected.append(entry)
    return valid, rejected


def strip_prefix(path: str, prefixes: Iterable[str]) -> str:
    """
    Remove the longest matching prefix from a path.

    Args:
        path: Path text to strip.
        prefixes: Candidate prefixes; empty entries are ignored.

    Returns:
        The path without its prefix, or unchanged if none matches.
    """
    best = ""
    for prefix in prefixes:
        if prefix and path.startswith(prefix) and len(prefix) > len(best):
            best = prefix
    return path[len(best):]


def display_path(path: str, prefixes: Sequence[str] = ()) -> str:
    """Shorten a path for display labels."""
    return strip_prefix(path, prefixes) or path
