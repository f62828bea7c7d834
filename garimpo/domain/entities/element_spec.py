"""Entidades que descrevem a árvore recursiva de seletores."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Leaf:
    """Seletor final: cada nó encontrado gera um valor renderizado."""

    #: Expressão CSS aplicada a partir do nó atual.
    selector: str
    #: Atributo lido no nó encontrado; usa o texto quando ausente.
    attribute: Optional[str] = None
    #: Processa todos os nós encontrados em vez de apenas o primeiro.
    multiple: bool = False
    #: Texto adicionado antes de cada valor renderizado.
    before: Optional[str] = None
    #: Texto adicionado depois de cada valor renderizado.
    after: Optional[str] = None


@dataclass(frozen=True)
class Container:
    """Seletor intermediário cujos filhos são avaliados dentro de cada nó encontrado."""

    selector: str
    #: Especificações aplicadas relativamente a cada nó encontrado.
    children: Tuple["ElementSpec", ...]
    multiple: bool = False
    # Mantidos para preservar a configuração original; não afetam a extração.
    attribute: Optional[str] = None
    before: Optional[str] = None
    after: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.children:
            raise ValueError(f"Container '{self.selector}' requires at least one child")


ElementSpec = Union[Leaf, Container]
