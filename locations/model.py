"""Data model for parsed file references and their resolutions."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Reference:
    """
    A file location found in a block of text.

    Attributes:
        file: Normalized path text as it appeared in the source.
        line: 1-based line number.
        column: 1-based column number, or None when the text carried none.
        original_text: The trimmed substring that was matched.
    """

    file: str
    line: int
    column: Optional[int] = None
    original_text: str = ""

    @property
    def key(self) -> Tuple[str, int, int]:
        """Deduplication key; an absent column counts as 0."""
        return (self.file, self.line, self.column or 0)

    @property
    def location(self) -> str:
        """Render as ``file:line[:column]``."""
        return format_location(self.file, self.line, self.column)


@dataclass(frozen=True)
class TraceEvent:
    """One step taken while resolving a path."""

    event: str
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.event}: {self.detail}" if self.detail else self.event


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of resolving one path string.

    Not finding a file is an ordinary outcome: ``path`` is None and
    ``found`` is False. ``candidates`` holds every match the search
    returned, best first, so callers can surface ambiguity instead of
    trusting the top pick.
    """

    query: str
    working_path: str = ""
    path: Optional[str] = None
    candidates: Tuple[str, ...] = ()
    trace: Tuple[TraceEvent, ...] = field(default=(), compare=False)

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def ambiguous(self) -> bool:
        return len(self.candidates) > 1


@dataclass(frozen=True)
class ResolvedReference:
    """A reference paired with the resolution of its file."""

    reference: Reference
    resolution: Resolution

    @property
    def found(self) -> bool:
        return self.resolution.found

    @property
    def path(self) -> Optional[str]:
        return self.resolution.path


def format_location(file: str, line: int, column: Optional[int] = None) -> str:
    """Join a path with its line and optional column."""
    if column:
        return f"{file}:{line}:{column}"
    return f"{file}:{line}"
