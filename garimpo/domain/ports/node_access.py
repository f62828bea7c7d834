"""Porta que abstrai o acesso aos nós de um documento."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class NodeAccess(ABC):
    """Define como o motor consulta nós, atributos e textos de um documento."""

    @abstractmethod
    def query_all(self, root: Any, selector: str) -> List[Any]:
        """Retornar os nós sob ``root`` que casam com ``selector``, em ordem de documento."""

    @abstractmethod
    def get_attribute(self, node: Any, name: str) -> Optional[str]:
        """Ler um atributo do nó, ou ``None`` quando ausente."""

    @abstractmethod
    def get_text(self, node: Any) -> Optional[str]:
        """Ler o conteúdo textual do nó e de seus descendentes."""
