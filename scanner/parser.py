"""Parsers for extracting file references from unstructured text."""

import re
from typing import Callable, Iterator, List, NamedTuple, Optional, Set, Tuple

from locations.model import Reference
from .paths import normalize_path


# Characters that end a path inside free text
_PATH_BODY = r"""[^\s:"'`()<>,]+"""

# Python: File "app/main.py", line 42, in <module>
TRACEBACK_PATTERN = re.compile(r'File "(?P<path>[^"]+)", line (?P<line>\d+)')

# Node/V8: at Object.<anonymous> (/src/index.js:42:15)
# ES modules: at f (file:///src/index.js:42:15), at f (file:///C:/src/index.js:1:2)
STACK_FRAME_PATTERN = re.compile(
    r"\bat\s.*?\((?:file://(?:/(?=[A-Za-z]:))?)?"
    r"(?P<path>(?:[A-Za-z]:)?[^:()]+):(?P<line>\d+):(?P<column>\d+)\)"
)

# scheme://... spans; generic tokens inside them are not file references
URL_PATTERN = re.compile(r"\b[A-Za-z][\w+.-]*://\S*")

# Anything else shaped like path:line[:column], including after a "label:"
GENERIC_PATTERN = re.compile(
    r"""
    (?<![\w.~/\\-])
    (?P<path>
        [A-Za-z]:[\\/]""" + _PATH_BODY + r"""
      | (?:\.{1,2}|~)/""" + _PATH_BODY + r"""
      | /""" + _PATH_BODY + r"""
      | [\w\-./\\]+\.[A-Za-z]\w*
    )
    :(?P<line>\d+)
    (?::(?P<column>\d+))?
    """,
    re.VERBOSE,
)


class RawMatch(NamedTuple):
    """A match produced by a single matcher, before normalization."""

    start: int
    path: str
    line: int
    column: Optional[int]
    text: str


class Matcher(NamedTuple):
    """A named matcher unit: ``find(line)`` yields raw matches."""

    name: str
    find: Callable[[str], List[RawMatch]]


def _to_raw(match: "re.Match[str]") -> RawMatch:
    groups = match.groupdict()
    column = groups.get("column")
    return RawMatch(
        start=match.start(),
        path=groups["path"],
        line=int(groups["line"]),
        column=int(column) if column else None,
        text=match.group(0).strip(),
    )


def find_traceback(line: str) -> List[RawMatch]:
    """Match a Python traceback frame header (at most once per line)."""
    match = TRACEBACK_PATTERN.search(line)
    return [_to_raw(match)] if match else []


def find_stack_frame(line: str) -> List[RawMatch]:
    """Match a parenthesized JS stack frame (at most once per line)."""
    match = STACK_FRAME_PATTERN.search(line)
    return [_to_raw(match)] if match else []


def find_generic(line: str) -> List[RawMatch]:
    """Match every ``path:line[:column]`` token on the line outside URLs."""
    urls = [match.span() for match in URL_PATTERN.finditer(line)]
    return [
        _to_raw(match)
        for match in GENERIC_PATTERN.finditer(line)
        if not any(start <= match.start() < end for start, end in urls)
    ]


# Earlier matchers win when two matches start at the same offset
MATCHERS: Tuple[Matcher, ...] = (
    Matcher("traceback", find_traceback),
    Matcher("stack-frame", find_stack_frame),
    Matcher("generic", find_generic),
)


def _build_reference(raw: RawMatch) -> Optional[Reference]:
    """Normalize a raw match, or return None if it is not a usable reference."""
    if raw.line <= 0:
        return None

    file = normalize_path(raw.path)
    if not file:
        return None

    return Reference(
        file=file,
        line=raw.line,
        column=raw.column if raw.column else None,
        original_text=raw.text,
    )


def _line_matches(line: str, matchers: Tuple[Matcher, ...]) -> List[RawMatch]:
    """Run every matcher over a line and order the results by position."""
    ranked: List[Tuple[int, int, RawMatch]] = []
    for priority, matcher in enumerate(matchers):
        for raw in matcher.find(line):
            ranked.append((raw.start, priority, raw))
    ranked.sort(key=lambda item: (item[0], item[1]))
    return [raw for _, _, raw in ranked]


def iter_references(
    text: str,
    matchers: Tuple[Matcher, ...] = MATCHERS,
) -> Iterator[Reference]:
    """
    Yield file references from text in order of first occurrence.

    Each line is scanned by every matcher. Overlapping matches from
    different matchers are both kept unless they parse to the same
    ``(file, line, column)`` key, in which case the first one wins.

    Args:
        text: Arbitrary text, e.g. a stack trace or compiler output.
        matchers: Matcher units to apply, highest priority first.

    Yields:
        Reference objects, deduplicated on ``Reference.key``.
    """
    seen: Set[Tuple[str, int, int]] = set()

    for line in text.split("\n"):
        for raw in _line_matches(line, matchers):
            reference = _build_reference(raw)
            if reference is None or reference.key in seen:
                continue
            seen.add(reference.key)
            yield reference


def parse_references(text: str) -> List[Reference]:
    """
    Extract file references from text.

    Args:
        text: Text to scan.

    Returns:
        List of references, possibly empty.
    """
    if not text:
        return []
    return list(iter_references(text))
