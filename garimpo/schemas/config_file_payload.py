"""Modelo Pydantic para um arquivo de configuração completo."""
from __future__ import annotations

from typing import List, Tuple

from pydantic import RootModel

from garimpo.domain.entities import PageConfig

from .element_payload import PageConfigPayload


class ConfigFilePayload(RootModel[List[PageConfigPayload]]):
    """Lista ordenada de páginas, como gravada em cada arquivo JSON."""

    def to_domain(self) -> Tuple[PageConfig, ...]:
        return tuple(page.to_domain() for page in self.root)


__all__ = ["ConfigFilePayload"]
