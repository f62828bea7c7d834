"""Resultados produzidos pela extração de páginas."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class LoadedPage:
    """Documento obtido para uma URL, com o estado da navegação."""

    url: str
    ok: bool
    root: Any = None
    final_url: Optional[str] = None
    status_code: Optional[int] = None


@dataclass(frozen=True)
class PageResult:
    """Texto final de uma página configurada."""

    url: str
    text: str
    ok: bool = True


@dataclass(slots=True)
class ExtractionReport:
    """Resumo de uma execução completa, na ordem da configuração."""

    pages: List[PageResult] = field(default_factory=list)

    def render(self) -> str:
        """Junta os textos das páginas, um por linha."""

        return "\n".join(page.text for page in self.pages)

    def __len__(self) -> int:
        return len(self.pages)
