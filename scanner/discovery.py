"""Filesystem access used by the resolver: existence checks and suffix search."""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set, Sequence

from .paths import expand_path, split_segments


DEFAULT_MAX_RESULTS = 20
DEFAULT_EXCLUDE_DIRS = {
    ".git", ".hg", ".svn",
    "node_modules", "bower_components", "__pycache__", ".tox", ".nox",
    ".mypy_cache", ".pytest_cache", ".ruff_cache",
    "venv", ".venv", "env", ".env",
    ".idea", ".vscode",
    "build", "dist", ".eggs", "*.egg-info",
}


def is_excluded_dir(name: str, exclude_dirs: Set[str]) -> bool:
    """Check a directory name against exact names and ``*suffix`` entries."""
    if name in exclude_dirs:
        return True
    return any(name.endswith(pat.lstrip("*")) for pat in exclude_dirs if pat.startswith("*"))


def iter_suffix_matches(
    root: Path,
    suffix: str,
    exclude_dirs: Optional[Set[str]] = None,
) -> Iterator[Path]:
    """
    Iterate over files under root whose trailing segments equal ``suffix``.

    Directories are visited in sorted order so results are stable between
    runs. Unreadable subdirectories are skipped; an unreadable root raises.

    Args:
        root: Directory to search.
        suffix: Trailing path fragment such as ``ui/button.tsx``.
        exclude_dirs: Directory names to skip.
                     If None, uses DEFAULT_EXCLUDE_DIRS.

    Yields:
        Path objects for matching files.
    """
    if exclude_dirs is None:
        exclude_dirs = DEFAULT_EXCLUDE_DIRS

    wanted = tuple(split_segments(suffix))
    if not wanted:
        return

    def _walk(entries: List[Path]) -> Iterator[Path]:
        for entry in entries:
            if entry.is_dir():
                if entry.is_symlink() or is_excluded_dir(entry.name, exclude_dirs):
                    continue
                try:
                    children = sorted(entry.iterdir())
                except PermissionError:
                    continue
                yield from _walk(children)
            elif entry.name == wanted[-1] and entry.is_file():
                if entry.parts[-len(wanted):] == wanted:
                    yield entry

    yield from _walk(sorted(root.iterdir()))


class LocalFileSystem:
    """Search capability backed by the local disk."""

    def exists(self, path: str) -> bool:
        """Check whether path names an existing regular file."""
        return Path(expand_path(path)).is_file()

    def search(
        self,
        roots: Sequence[str],
        suffix: str,
        exclude_dirs: Optional[Iterable[str]] = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> List[str]:
        """
        Find files ending with ``suffix`` under each root, in root order.

        Args:
            roots: Workspace root directories.
            suffix: Trailing path fragment to look for.
            exclude_dirs: Directory names to skip (default: DEFAULT_EXCLUDE_DIRS).
            max_results: Stop after this many matches.

        Returns:
            Matching file paths as strings.
        """
        excluded = set(exclude_dirs) if exclude_dirs is not None else None
        results: List[str] = []
        for root in roots:
            for match in iter_suffix_matches(Path(root), suffix, excluded):
                results.append(str(match))
                if len(results) >= max_results:
                    return results
        return results
