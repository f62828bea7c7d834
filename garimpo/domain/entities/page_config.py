"""Entidade que associa uma URL às especificações extraídas dela."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .element_spec import ElementSpec


@dataclass(frozen=True)
class PageConfig:
    """Configura uma página alvo e seus seletores de primeiro nível."""

    #: Endereço absoluto visitado durante a extração.
    url: str
    #: Especificações aplicadas à raiz do documento, em ordem.
    elements: Tuple[ElementSpec, ...]


@dataclass(frozen=True)
class LoadedConfigFile:
    """Arquivo de configuração já validado."""

    name: str
    pages: Tuple[PageConfig, ...]
