"""Path resolution utilities for mapping reference paths to actual files."""

import math
import os
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from locations.model import Resolution, TraceEvent
from .discovery import DEFAULT_MAX_RESULTS, LocalFileSystem
from .errors import CapabilityError
from .paths import expand_path, is_absolute, normalize_path, search_suffix, split_segments
from .prefixes import strip_prefix


# How many trailing segments of the working path are trusted for searching
SEARCH_DEPTH = 3


class FileSystem(Protocol):
    """What the resolver needs from its caller's filesystem view."""

    def exists(self, path: str) -> bool: ...

    def search(
        self,
        roots: Sequence[str],
        suffix: str,
        exclude_dirs: Optional[Iterable[str]] = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> List[str]: ...


def score_candidate(candidate: str, working_path: str) -> float:
    """
    Count the trailing segments a candidate shares with the working path.

    Segments are compared from the end until the first disagreement. If
    every segment of the working path agrees the score is infinite.

    Args:
        candidate: A path returned by the search.
        working_path: The normalized path being resolved.

    Returns:
        Number of agreeing trailing segments, or ``math.inf``.
    """
    wanted = split_segments(working_path)
    have = split_segments(candidate)

    score = 0
    for want, got in zip(reversed(wanted), reversed(have)):
        if want != got:
            return score
        score += 1

    if score == len(wanted):
        return math.inf
    return score


def rank_candidates(candidates: Sequence[str], working_path: str) -> List[str]:
    """
    Order candidates best first by trailing-segment score.

    The sort is stable, so equally scored candidates keep the order the
    search returned them in.
    """
    return sorted(candidates, key=lambda c: score_candidate(c, working_path), reverse=True)


def working_path_for(candidate: str, strip_prefixes: Sequence[str] = ()) -> str:
    """Strip the configured prefix, then normalize."""
    return normalize_path(strip_prefix(candidate.strip(), strip_prefixes))


def resolve_path(
    candidate: str,
    roots: Sequence[str],
    filesystem: Optional[FileSystem] = None,
    strip_prefixes: Sequence[str] = (),
    exclude_dirs: Optional[Iterable[str]] = None,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> Resolution:
    """
    Resolve a path string from a reference to an existing file.

    Tries, in order:
    1. The working path itself, if it is absolute and exists.
    2. The working path joined onto each workspace root.
    3. A search for files ending with the working path's last segments,
       ranked by trailing-segment score when several match.

    Args:
        candidate: Raw path text, typically ``Reference.file``.
        roots: Workspace root directories. Relative roots are taken from
               the current directory.
        filesystem: Existence/search capability (default: LocalFileSystem).
        strip_prefixes: Prefixes to remove before resolving.
        exclude_dirs: Directory names the search skips.
        max_results: Cap on search results.

    Returns:
        A Resolution; ``found`` is False when nothing matched.

    Raises:
        CapabilityError: If the filesystem raised an OSError.
    """
    if filesystem is None:
        filesystem = LocalFileSystem()

    # Returned paths are built from the roots, so they must be absolute
    roots = [os.path.abspath(expand_path(root)) for root in roots]

    trace: List[TraceEvent] = []
    working = ""

    def _result(path: Optional[str] = None, candidates: Tuple[str, ...] = ()) -> Resolution:
        if path is None:
            trace.append(TraceEvent("not-found", candidate))
        return Resolution(
            query=candidate,
            working_path=working,
            path=path,
            candidates=candidates,
            trace=tuple(trace),
        )

    if not candidate or not candidate.strip():
        trace.append(TraceEvent("empty-path"))
        return _result()

    working = working_path_for(candidate, strip_prefixes)
    if working != normalize_path(candidate.strip()):
        trace.append(TraceEvent("prefix-stripped", working))
    if not working:
        trace.append(TraceEvent("empty-path"))
        return _result()

    try:
        if is_absolute(working):
            direct = expand_path(working)
            if filesystem.exists(direct):
                trace.append(TraceEvent("absolute-hit", direct))
                return _result(direct, (direct,))
            trace.append(TraceEvent("absolute-miss", direct))
        else:
            for root in roots:
                joined = os.path.join(root, working)
                if filesystem.exists(joined):
                    trace.append(TraceEvent("workspace-hit", joined))
                    return _result(joined, (joined,))

        if not roots:
            trace.append(TraceEvent("no-roots"))
            return _result()

        suffix = search_suffix(working, SEARCH_DEPTH)
        if not suffix:
            trace.append(TraceEvent("empty-path", working))
            return _result()

        trace.append(TraceEvent("search", suffix))
        matches = filesystem.search(roots, suffix, exclude_dirs, max_results)
    except OSError as e:
        raise CapabilityError(f"Failed to resolve '{candidate}': {e}") from e

    if not matches:
        return _result()

    if len(matches) == 1:
        trace.append(TraceEvent("search-hit", matches[0]))
        return _result(matches[0], (matches[0],))

    ranked = rank_candidates(matches, working)
    trace.append(TraceEvent("ranked", f"{len(ranked)} candidates, picked {ranked[0]}"))
    return _result(ranked[0], tuple(ranked))
