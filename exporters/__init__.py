"""Exporters for rendering resolved references in various output formats."""

from .text_exporter import to_text, to_goto
from .json_exporter import to_json

__all__ = ["to_text", "to_goto", "to_json"]
