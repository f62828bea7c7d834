"""Acesso a nós de documentos HTML analisados pelo BeautifulSoup."""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from bs4 import Tag
from soupsieve import SelectorSyntaxError

from garimpo.domain.ports import NodeAccess


class SoupNodeAccess(NodeAccess):
    """Implementa :class:`NodeAccess` com ``select`` do soupsieve."""

    def __init__(self) -> None:
        self._log = logging.getLogger("garimpo.nodes")

    def query_all(self, root: Any, selector: str) -> List[Tag]:
        """Seleciona nós em ordem de documento, tolerando seletores malformados.

        Seletores com colchetes ou aspas sem fechamento são corrigidos antes de
        uma segunda tentativa. Se continuarem inválidos, nenhum nó é retornado.
        """

        try:
            return list(root.select(selector))
        except NotImplementedError as exc:
            # Pseudo-elementos e at-rules não existem na árvore analisada.
            self._log.warning("seletor não suportado '%s': %s", selector, exc)
            return []
        except SelectorSyntaxError as exc:
            normalized = normalize_selector_query(selector)
            if normalized == selector:
                self._log.warning("seletor inválido '%s': %s", selector, exc)
                return []
            self._log.debug(
                "ajustando seletor malformado '%s' para '%s'", selector, normalized
            )
            try:
                return list(root.select(normalized))
            except (SelectorSyntaxError, NotImplementedError) as exc2:
                self._log.warning("seletor inválido '%s': %s", selector, exc2)
                return []

    def get_attribute(self, node: Tag, name: str) -> Optional[str]:
        value = node.get(name)
        if value is None:
            return None
        # Atributos multivalorados (ex.: ``class``) chegam como lista.
        if isinstance(value, (list, tuple)):
            return " ".join(str(item) for item in value)
        return str(value)

    def get_text(self, node: Tag) -> Optional[str]:
        return node.get_text()


def normalize_selector_query(query: str) -> str:
    """Corrige seletores com colchetes e aspas ausentes.

    Fecha aspas e colchetes pendentes no fim do texto, como os navegadores
    fazem ao analisar um seletor truncado.
    """

    result: list[str] = []
    bracket_balance = 0
    quote_char: str | None = None

    for char in query:
        if char in ("'", '"'):
            if quote_char is None:
                quote_char = char
            elif quote_char == char:
                quote_char = None

        if char == "[" and quote_char is None:
            bracket_balance += 1
        elif char == "]":
            if quote_char is not None:
                # Fecha aspas antes de fechar o colchete.
                result.append(quote_char)
                quote_char = None
            if bracket_balance > 0:
                bracket_balance -= 1

        result.append(char)

    if quote_char is not None:
        result.append(quote_char)

    if bracket_balance > 0:
        result.extend("]" * bracket_balance)

    return "".join(result)


__all__ = ["SoupNodeAccess", "normalize_selector_query"]
