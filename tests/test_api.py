"""Testes da API HTTP de extração."""
from __future__ import annotations

from bs4 import BeautifulSoup
from fastapi.testclient import TestClient

from garimpo.api import create_app
from garimpo.application import PageExtractionService
from garimpo.container import ExtractionContainer
from garimpo.domain import LoadedPage, PageLoader
from garimpo.extraction import ExtractionEngine
from garimpo.infrastructure import ConfigLoader, SoupNodeAccess


class _FakePageLoader(PageLoader):
    def load(self, url: str) -> LoadedPage:
        if "falha" in url:
            return LoadedPage(url=url, ok=False, status_code=503)
        html = "<main><h1>Oferta</h1><a class='comprar' href='/c/1'>comprar</a></main>"
        return LoadedPage(url=url, ok=True, root=BeautifulSoup(html, "html.parser"))


def _client(tmp_path) -> TestClient:
    loader = _FakePageLoader()
    engine = ExtractionEngine(SoupNodeAccess())
    container = ExtractionContainer(
        config_loader=ConfigLoader(tmp_path),
        page_loader=loader,
        engine=engine,
        extraction_service=PageExtractionService(loader, engine),
    )
    return TestClient(create_app(container))


def test_health(tmp_path) -> None:
    response = _client(tmp_path).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_extract_returns_pages_and_report(tmp_path) -> None:
    payload = [
        {
            "url": "https://loja.test/ofertas",
            "elements": [
                {
                    "selector": "main",
                    "elements": [
                        {"selector": "h1", "after": ": "},
                        {"selector": "a.comprar", "attribute": "href"},
                    ],
                }
            ],
        },
        {"url": "https://falha.test", "elements": [{"selector": "h1"}]},
    ]

    response = _client(tmp_path).post("/extract", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["pages"] == [
        {"url": "https://loja.test/ofertas", "ok": True, "text": "Oferta: https://loja.test/c/1"},
        {"url": "https://falha.test", "ok": False, "text": "Had trouble with: https://falha.test"},
    ]
    assert body["report"] == "Oferta: https://loja.test/c/1\nHad trouble with: https://falha.test"


def test_extract_rejects_invalid_configuration(tmp_path) -> None:
    response = _client(tmp_path).post(
        "/extract", json=[{"url": "https://loja.test", "elements": []}]
    )

    assert response.status_code == 422
