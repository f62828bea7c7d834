"""Extração de valores a partir de árvores de seletores."""
from .engine import ExtractionEngine, extract
from .fallback import empty_value_message, no_match_message
from .renderer import normalize_value, render

__all__ = [
    "ExtractionEngine",
    "extract",
    "render",
    "normalize_value",
    "no_match_message",
    "empty_value_message",
]
