"""Motor recursivo que percorre a árvore de seletores sobre um documento."""
from __future__ import annotations

import logging
from typing import Any, List, Sequence

from garimpo.domain.entities import Container, ElementSpec, Leaf
from garimpo.domain.ports import NodeAccess

from .fallback import no_match_message
from .renderer import render


class ExtractionEngine:
    """Aplica especificações de elementos a um documento e coleta os valores.

    O motor não altera a configuração nem o documento e nunca lança exceções
    por ausência de nós: seletores sem correspondência e valores vazios viram
    mensagens de fallback na posição que ocupariam na saída.
    """

    def __init__(self, nodes: NodeAccess) -> None:
        self._nodes = nodes
        self._log = logging.getLogger("garimpo.engine")

    def extract(
        self, elements: Sequence[ElementSpec], root: Any, page_url: str
    ) -> List[str]:
        values: List[str] = []
        for spec in elements:
            values.extend(self._extract_spec(spec, root, page_url))
        return values

    def _extract_spec(self, spec: ElementSpec, root: Any, page_url: str) -> List[str]:
        candidates = self._select(spec, root)
        if not candidates:
            self._log.debug("nenhum nó para '%s'", spec.selector)
            return [no_match_message(spec)]

        values: List[str] = []
        if isinstance(spec, Container):
            for candidate in candidates:
                values.extend(self.extract(spec.children, candidate, page_url))
        elif isinstance(spec, Leaf):
            for candidate in candidates:
                values.append(render(candidate, spec, page_url, self._nodes))
        else:  # pragma: no cover - variantes são fechadas
            raise TypeError(f"Unsupported element spec: {spec!r}")
        return values

    def _select(self, spec: ElementSpec, root: Any) -> List[Any]:
        matches = self._nodes.query_all(root, spec.selector)
        if spec.multiple:
            return list(matches)
        return list(matches[:1])


def extract(
    elements: Sequence[ElementSpec], root: Any, page_url: str, nodes: NodeAccess
) -> List[str]:
    """Atalho funcional para :meth:`ExtractionEngine.extract`."""

    return ExtractionEngine(nodes).extract(elements, root, page_url)


__all__ = ["ExtractionEngine", "extract"]
