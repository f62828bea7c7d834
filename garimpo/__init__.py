"""Garimpo - extração declarativa de valores de páginas web."""
from .application import PageExtractionService
from .container import build_container
from .domain import Container, ElementSpec, Leaf, PageConfig
from .extraction import ExtractionEngine, extract, render

__all__ = [
    "Leaf",
    "Container",
    "ElementSpec",
    "PageConfig",
    "ExtractionEngine",
    "extract",
    "render",
    "PageExtractionService",
    "build_container",
]
