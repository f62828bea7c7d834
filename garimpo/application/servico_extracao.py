"""Serviço de orquestração da extração de páginas configuradas."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, List, Sequence

from garimpo.domain import (
    ExtractionReport,
    LoadedConfigFile,
    PageConfig,
    PageLoader,
    PageResult,
)
from garimpo.extraction import ExtractionEngine


def navigation_failure_message(url: str) -> str:
    return f"Had trouble with: {url}"


class PageExtractionService:
    """Coordena o carregamento das páginas e a execução do motor de extração."""

    def __init__(
        self,
        page_loader: PageLoader,
        engine: ExtractionEngine,
        *,
        max_workers: int = 8,
        status_publisher: Callable[[str], None] | None = None,
    ) -> None:
        """Configura o serviço com todas as dependências necessárias.

        Args:
            page_loader: Componente que busca o documento de cada URL.
            engine: Motor que aplica as especificações ao documento.
            max_workers: Quantidade máxima de páginas processadas em paralelo.
            status_publisher: Callback opcional usado para publicar mensagens
                de status durante a execução.
        """

        self._page_loader = page_loader
        self._engine = engine
        self._max_workers = max(1, max_workers)
        self._status_publisher = status_publisher
        self._log = logging.getLogger("garimpo.service")

    def _publish_status(
        self,
        message: str,
        status_publisher: Callable[[str], None] | None = None,
    ) -> None:
        callback = status_publisher or self._status_publisher
        if callback:
            callback(message)

    def extract_page(self, config: PageConfig) -> PageResult:
        """Processa uma única página e devolve o texto concatenado.

        Falhas de navegação viram a mensagem ``Had trouble with``; erros
        inesperados são registrados e a página contribui com texto vazio.
        """

        try:
            page = self._page_loader.load(config.url)
            if not page.ok:
                return PageResult(
                    url=config.url,
                    text=navigation_failure_message(config.url),
                    ok=False,
                )
            values = self._engine.extract(config.elements, page.root, config.url)
        except Exception:
            self._log.exception("falha inesperada ao processar %s", config.url)
            return PageResult(url=config.url, text="", ok=False)
        return PageResult(url=config.url, text="".join(values))

    def extract_pages(
        self,
        configs: Sequence[PageConfig],
        status_publisher: Callable[[str], None] | None = None,
    ) -> ExtractionReport:
        """Processa as páginas em paralelo preservando a ordem da configuração."""

        total = len(configs)
        results: List[PageResult | None] = [None] * total
        if not total:
            return ExtractionReport()

        self._publish_status(f"Processando {total} página(s)", status_publisher)
        workers = min(self._max_workers, total)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(self.extract_page, config): index
                for index, config in enumerate(configs)
            }
            for future in as_completed(futures):
                index = futures[future]
                result = future.result()
                results[index] = result
                status = "ok" if result.ok else "falha"
                self._publish_status(
                    f"Página {index + 1}/{total}: {result.url} ({status})",
                    status_publisher,
                )
        return ExtractionReport(pages=[result for result in results if result is not None])

    def run(
        self,
        files: Iterable[LoadedConfigFile],
        status_publisher: Callable[[str], None] | None = None,
    ) -> ExtractionReport:
        """Executa todas as páginas de todos os arquivos carregados."""

        configs = [page for config_file in files for page in config_file.pages]
        return self.extract_pages(configs, status_publisher)


__all__ = ["PageExtractionService", "navigation_failure_message"]
