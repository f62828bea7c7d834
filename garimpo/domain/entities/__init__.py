"""Entidades de domínio utilizadas na extração de valores."""
from .element_spec import Container, ElementSpec, Leaf
from .page_config import LoadedConfigFile, PageConfig
from .page_result import ExtractionReport, LoadedPage, PageResult

__all__ = [
    "Leaf",
    "Container",
    "ElementSpec",
    "PageConfig",
    "LoadedConfigFile",
    "LoadedPage",
    "PageResult",
    "ExtractionReport",
]
