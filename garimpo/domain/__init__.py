"""API pública do domínio do Garimpo.

O módulo centraliza as entidades e portas mais utilizadas para que possam ser
importadas diretamente de ``garimpo.domain``.
"""

from .entities import (
    Container,
    ElementSpec,
    ExtractionReport,
    Leaf,
    LoadedConfigFile,
    LoadedPage,
    PageConfig,
    PageResult,
)
from .ports import NodeAccess, PageLoader

__all__ = [
    "Leaf",
    "Container",
    "ElementSpec",
    "PageConfig",
    "LoadedConfigFile",
    "LoadedPage",
    "PageResult",
    "ExtractionReport",
    "NodeAccess",
    "PageLoader",
]
