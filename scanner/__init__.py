"""Scanner module for reference extraction and path resolution."""

from .parser import parse_references, iter_references
from .paths import normalize_path
from .prefixes import clean_prefixes, strip_prefix, display_path
from .discovery import LocalFileSystem
from .resolver import resolve_path, rank_candidates, score_candidate
from .builder import locate
from .errors import FileRefError, CapabilityError, SettingsError

__all__ = [
    "parse_references",
    "iter_references",
    "normalize_path",
    "clean_prefixes",
    "strip_prefix",
    "display_path",
    "LocalFileSystem",
    "resolve_path",
    "rank_candidates",
    "score_candidate",
    "locate",
    "FileRefError",
    "CapabilityError",
    "SettingsError",
]
