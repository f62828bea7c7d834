"""Container de dependências para os serviços de extração."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from garimpo.application import PageExtractionService
from garimpo.domain import PageLoader
from garimpo.extraction import ExtractionEngine
from garimpo.infrastructure import ConfigLoader, RequestsPageLoader, SoupNodeAccess
from garimpo.settings import get_config_dir, get_max_workers, get_request_timeout


@dataclass
class ExtractionContainer:
    """Expõe as dependências do serviço de extração."""

    config_loader: ConfigLoader
    page_loader: PageLoader
    engine: ExtractionEngine
    extraction_service: PageExtractionService


def build_container(
    *,
    config_dir: Path | None = None,
    max_workers: int | None = None,
    timeout: float | None = None,
    status_publisher: Callable[[str], None] | None = None,
) -> ExtractionContainer:
    """Monta o container a partir das configurações do ambiente."""

    config_loader = ConfigLoader(config_dir or get_config_dir())
    page_loader = RequestsPageLoader(
        timeout=timeout if timeout is not None else get_request_timeout()
    )
    engine = ExtractionEngine(SoupNodeAccess())
    extraction_service = PageExtractionService(
        page_loader,
        engine,
        max_workers=max_workers or get_max_workers(),
        status_publisher=status_publisher,
    )
    return ExtractionContainer(
        config_loader=config_loader,
        page_loader=page_loader,
        engine=engine,
        extraction_service=extraction_service,
    )


__all__ = ["ExtractionContainer", "build_container"]
