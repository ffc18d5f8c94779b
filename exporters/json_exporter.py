"""JSON exporter for resolved references (machine-friendly format)."""

import json
from typing import Any, Dict, List, Sequence

from locations.model import ResolvedReference


def to_json(
    resolved: Sequence[ResolvedReference],
    indent: int = 2,
    include_missing: bool = True,
) -> str:
    """
    Convert resolved references to JSON.

    Args:
        resolved: References with their resolutions, in parse order.
        indent: JSON indentation level.
        include_missing: If True, include references that did not resolve
                         (their ``resolved`` field is null).

    Returns:
        JSON string: a list of reference objects.
    """
    items: List[Dict[str, Any]] = []
    for item in resolved:
        if not include_missing and not item.found:
            continue
        ref = item.reference
        items.append({
            "file": ref.file,
            "line": ref.line,
            "column": ref.column,
            "original_text": ref.original_text,
            "resolved": item.path,
            "candidates": list(item.resolution.candidates),
        })

    return json.dumps(items, indent=indent)
