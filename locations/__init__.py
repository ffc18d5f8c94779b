"""Value types shared by the parser, resolver and exporters."""

from .model import Reference, Resolution, ResolvedReference, TraceEvent, format_location

__all__ = [
    "Reference",
    "Resolution",
    "ResolvedReference",
    "TraceEvent",
    "format_location",
]
