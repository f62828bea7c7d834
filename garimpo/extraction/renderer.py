"""Conversão de um nó encontrado em um valor textual decorado."""
from __future__ import annotations

import logging
import re
from typing import Any, Optional
from urllib.parse import urljoin

from garimpo.domain.entities import Leaf
from garimpo.domain.ports import NodeAccess

from .fallback import empty_value_message

_TABS_AND_NEWLINES_RE = re.compile(r"[\t\n\r]")

_LINK_ATTRIBUTE = "href"

_log = logging.getLogger("garimpo.renderer")


def normalize_value(value: Optional[str]) -> Optional[str]:
    """Remove espaços nas bordas e tabulações/quebras de linha internas.

    Valores ausentes continuam ausentes e valores vazios após a limpeza são
    tratados como ausentes.
    """

    if value is None:
        return None
    cleaned = _TABS_AND_NEWLINES_RE.sub("", value.strip())
    return cleaned or None


def resolve_link(page_url: str, value: str) -> str:
    """Torna ``value`` absoluto; links que não formam URL válida ficam como estão."""

    try:
        return urljoin(page_url, value)
    except ValueError as exc:
        _log.debug("link inválido '%s' em %s: %s", value, page_url, exc)
        return value


def render(node: Any, spec: Leaf, page_url: str, nodes: NodeAccess) -> str:
    """Renderiza o valor de ``node`` conforme a especificação ``spec``.

    A ordem das etapas é fixa: origem (atributo ou texto), normalização,
    resolução de links ``href`` contra ``page_url``, mensagem de fallback e,
    por fim, os textos ``before``/``after``.
    """

    if spec.attribute:
        raw = nodes.get_attribute(node, spec.attribute)
    else:
        raw = nodes.get_text(node)

    value = normalize_value(raw)

    if value is not None and spec.attribute == _LINK_ATTRIBUTE:
        value = resolve_link(page_url, value)

    if value is None:
        value = empty_value_message(spec)

    return f"{spec.before or ''}{value}{spec.after or ''}"


__all__ = ["normalize_value", "render", "resolve_link"]
