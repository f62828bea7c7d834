"""API HTTP que expõe o motor de extração."""
from __future__ import annotations

from typing import List

import uvicorn
from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from garimpo.container import ExtractionContainer, build_container
from garimpo.schemas import PageConfigPayload
from garimpo.settings import get_api_bind_host, get_api_port


class PageResultResponse(BaseModel):
    """Texto extraído de uma página."""

    url: str
    ok: bool
    text: str


class ExtractionResponse(BaseModel):
    """Resultado de uma extração, página a página e como relatório único."""

    pages: List[PageResultResponse]
    report: str


def configure_cors(app: FastAPI) -> None:
    """Apply the default CORS configuration used by the service."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def include_routes(
    app: FastAPI, container: ExtractionContainer, *, prefix: str = ""
) -> None:
    """Register extraction routes on a FastAPI application."""

    router = APIRouter(prefix=prefix, tags=["Extração"])

    @router.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @router.post("/extract", response_model=ExtractionResponse)
    def extract(payload: List[PageConfigPayload]) -> ExtractionResponse:
        configs = [page.to_domain() for page in payload]
        report = container.extraction_service.extract_pages(configs)
        return ExtractionResponse(
            pages=[
                PageResultResponse(url=page.url, ok=page.ok, text=page.text)
                for page in report.pages
            ],
            report=report.render(),
        )

    app.include_router(router)


def create_app(container: ExtractionContainer | None = None) -> FastAPI:
    """Cria a aplicação FastAPI com as rotas de extração."""

    container = container or build_container()
    app = FastAPI(
        title="Garimpo API",
        version="1.0.0",
        description="Extrai valores de páginas a partir de árvores de seletores CSS.",
    )
    configure_cors(app)
    include_routes(app, container)
    return app


def run() -> None:
    """Executa a API utilizando o Uvicorn."""

    load_dotenv()
    uvicorn.run(
        "garimpo.api:create_app",
        host=get_api_bind_host(),
        port=get_api_port(),
        factory=True,
    )


__all__ = ["create_app", "include_routes", "run"]
