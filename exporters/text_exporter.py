"""Human-readable exporter: one block per reference, like an editor picker."""

from typing import List, Sequence

from locations.model import ResolvedReference, format_location
from scanner.prefixes import display_path


ARROW = "->"


def to_text(
    resolved: Sequence[ResolvedReference],
    strip_prefixes: Sequence[str] = (),
    newest_first: bool = True,
    include_missing: bool = False,
    show_candidates: bool = True,
) -> str:
    """
    Render resolved references as a readable listing.

    Each entry shows a label (``path:line[:column]`` with prefixes
    stripped), the text it was parsed from, and where it resolved to.

    Args:
        resolved: References with their resolutions, in parse order.
        strip_prefixes: Prefixes removed from labels.
        newest_first: List the last reference first. Tracebacks print the
                      innermost frame last, so this puts it on top.
        include_missing: If True, also list references that did not resolve.
        show_candidates: If True, list the other candidates of an
                         ambiguous resolution.

    Returns:
        The listing, or an empty string when there is nothing to show.
    """
    entries = [item for item in resolved if include_missing or item.found]
    if newest_first:
        entries = entries[::-1]

    blocks: List[str] = []
    for item in entries:
        ref = item.reference
        label = format_location(display_path(ref.file, strip_prefixes), ref.line, ref.column)
        position = f"Line {ref.line}"
        if ref.column:
            position += f", Column {ref.column}"

        lines = [label, f"    {ref.original_text}"]
        if item.found:
            lines.append(f"    {position} {ARROW} {item.path}")
            if show_candidates and item.resolution.ambiguous:
                for other in item.resolution.candidates[1:]:
                    lines.append(f"    also: {other}")
        else:
            lines.append(f"    {position} {ARROW} (not found)")
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)


def to_goto(resolved: Sequence[ResolvedReference]) -> str:
    """
    Render found references as ``path:line[:column]``, one per line.

    This is the form most editors accept on their command line.
    """
    return "\n".join(
        format_location(item.path, item.reference.line, item.reference.column)
        for item in resolved
        if item.path is not None
    )
