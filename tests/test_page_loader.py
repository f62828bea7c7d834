"""Testes do carregamento de páginas com requests."""
from __future__ import annotations

from typing import Dict

import requests

from garimpo.infrastructure import RequestsPageLoader


class _DummyResponse:
    def __init__(self, url: str, text: str, status_code: int = 200) -> None:
        self.url = url
        self.text = text
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class _DummySession:
    def __init__(self, responses: Dict[str, _DummyResponse]) -> None:
        self._responses = responses
        self.calls: list[tuple[str, dict | None, float | None]] = []

    def get(self, url: str, headers: dict | None = None, timeout: float | None = None):
        self.calls.append((url, headers, timeout))
        if url not in self._responses:
            raise requests.ConnectionError(f"sem rota para {url}")
        return self._responses[url]


def test_load_parses_document() -> None:
    session = _DummySession(
        {"https://e.test": _DummyResponse("https://e.test/", "<h1>Olá</h1>")}
    )
    loader = RequestsPageLoader(session=session, timeout=5, headers={"X-Teste": "1"})

    page = loader.load("https://e.test")

    assert page.ok
    assert page.status_code == 200
    assert page.final_url == "https://e.test/"
    assert page.root.select_one("h1").get_text() == "Olá"
    _, headers, timeout = session.calls[0]
    assert headers["X-Teste"] == "1"
    assert "User-Agent" in headers
    assert timeout == 5


def test_error_status_is_not_ok() -> None:
    session = _DummySession(
        {"https://e.test/404": _DummyResponse("https://e.test/404", "nada", 404)}
    )

    page = RequestsPageLoader(session=session).load("https://e.test/404")

    assert not page.ok
    assert page.status_code == 404
    assert page.root is None


def test_network_error_is_not_ok() -> None:
    page = RequestsPageLoader(session=_DummySession({})).load("https://fora.test")

    assert not page.ok
    assert page.status_code is None
    assert page.url == "https://fora.test"
