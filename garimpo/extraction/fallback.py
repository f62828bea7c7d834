"""Mensagens exibidas no lugar de valores que não puderam ser extraídos."""
from __future__ import annotations

from garimpo.domain.entities import ElementSpec

TEXT_CONTENT = "textContent"


def no_match_message(spec: ElementSpec) -> str:
    """Mensagem para um seletor que não encontrou nenhum nó."""

    return f"Could not find by selector: {spec.selector}"


def empty_value_message(spec: ElementSpec) -> str:
    """Mensagem para um nó encontrado que não forneceu valor utilizável."""

    source = spec.attribute or TEXT_CONTENT
    return f"Could not get a value for {spec.selector} by {source}"


__all__ = ["TEXT_CONTENT", "empty_value_message", "no_match_message"]
