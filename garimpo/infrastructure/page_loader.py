"""Carregamento de páginas via HTTP com requests e BeautifulSoup."""
from __future__ import annotations

import logging
from typing import Mapping

import requests
from bs4 import BeautifulSoup

from garimpo.domain.entities import LoadedPage
from garimpo.domain.ports import PageLoader


_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/126.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,image/apng,*/*;q=0.8"
    ),
    "Accept-Language": "en-US,en;q=0.9,pt-BR;q=0.8",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Cache-Control": "no-cache",
}


class RequestsPageLoader(PageLoader):
    """Busca páginas com ``requests`` e devolve a árvore do BeautifulSoup.

    Falhas de rede e respostas com status de erro não geram exceções: a página
    volta com ``ok=False`` para que o orquestrador registre o problema.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float | None = 30,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout
        self._headers: dict[str, str] = dict(_DEFAULT_HEADERS)
        if headers:
            self._headers.update(headers)
        self._log = logging.getLogger("garimpo.page_loader")

    def load(self, url: str) -> LoadedPage:
        self._log.info("GET %s", url)
        try:
            response = self._session.get(
                url, headers=dict(self._headers), timeout=self._timeout
            )
        except requests.RequestException as exc:
            self._log.warning("falha ao abrir %s: %s", url, exc)
            return LoadedPage(url=url, ok=False)

        if not response.ok:
            self._log.warning("%s retornou status %s", url, response.status_code)
            return LoadedPage(
                url=url,
                ok=False,
                final_url=response.url,
                status_code=response.status_code,
            )

        soup = BeautifulSoup(response.text, "html.parser")
        return LoadedPage(
            url=url,
            ok=True,
            root=soup,
            final_url=response.url,
            status_code=response.status_code,
        )


__all__ = ["RequestsPageLoader"]
