"""Portas que conectam o domínio com adaptadores externos."""
from .node_access import NodeAccess
from .page_loader import PageLoader

__all__ = ["NodeAccess", "PageLoader"]
