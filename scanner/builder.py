"""Orchestrates parsing a block of text and resolving each reference."""

import logging
from typing import Iterable, List, Optional, Sequence

from locations.model import ResolvedReference
from .discovery import DEFAULT_MAX_RESULTS
from .parser import parse_references
from .resolver import FileSystem, resolve_path

logger = logging.getLogger(__name__)


def locate(
    text: str,
    roots: Sequence[str],
    filesystem: Optional[FileSystem] = None,
    strip_prefixes: Sequence[str] = (),
    exclude_dirs: Optional[Iterable[str]] = None,
    max_results: int = DEFAULT_MAX_RESULTS,
    first_only: bool = False,
) -> List[ResolvedReference]:
    """
    Find every file reference in text and resolve it.

    References are resolved independently, in the order they were parsed.
    Unresolved references are kept with a not-found resolution.

    Args:
        text: Text to scan (stack trace, log excerpt, ...).
        roots: Workspace root directories.
        filesystem: Existence/search capability (default: local disk).
        strip_prefixes: Prefixes removed before resolving.
        exclude_dirs: Directory names the search skips.
        max_results: Cap on search results per reference.
        first_only: Only resolve the first reference found.

    Returns:
        List of ResolvedReference in parse order.

    Raises:
        CapabilityError: If the filesystem failed while resolving.
    """
    references = parse_references(text)
    logger.info("Parsed %d reference(s)", len(references))
    if first_only:
        references = references[:1]

    resolved: List[ResolvedReference] = []
    for reference in references:
        resolution = resolve_path(
            reference.file,
            roots,
            filesystem=filesystem,
            strip_prefixes=strip_prefixes,
            exclude_dirs=exclude_dirs,
            max_results=max_results,
        )
        for event in resolution.trace:
            logger.debug("%s: %s", reference.location, event)
        if not resolution.found:
            logger.info("File not found: %s", reference.file)
        elif resolution.ambiguous:
            logger.info(
                "%s matched %d files, using %s",
                reference.file, len(resolution.candidates), resolution.path,
            )
        resolved.append(ResolvedReference(reference, resolution))

    return resolved
