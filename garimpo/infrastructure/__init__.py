"""Adaptadores de infraestrutura do Garimpo."""
from .config_loader import ConfigFileError, ConfigLoader, parse_config_file
from .page_loader import RequestsPageLoader
from .soup_nodes import SoupNodeAccess, normalize_selector_query

__all__ = [
    "ConfigFileError",
    "ConfigLoader",
    "parse_config_file",
    "RequestsPageLoader",
    "SoupNodeAccess",
    "normalize_selector_query",
]
