"""Porta de entrada que fornece documentos para as URLs configuradas."""
from __future__ import annotations

from abc import ABC, abstractmethod

from garimpo.domain.entities import LoadedPage


class PageLoader(ABC):
    """Define como a aplicação obtém o documento de uma página."""

    @abstractmethod
    def load(self, url: str) -> LoadedPage:
        """Buscar a página e informar se a navegação foi bem-sucedida."""
