"""Modelos Pydantic que validam a árvore recursiva de seletores."""
from __future__ import annotations

from typing import Any, List, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator, model_validator

from garimpo.domain.entities import Container, ElementSpec, Leaf, PageConfig


class ElementPayload(BaseModel):
    """Representa um seletor recebido em arquivos de configuração ou na API."""

    model_config = ConfigDict(extra="ignore")

    #: Expressão CSS obrigatória e não vazia.
    selector: str
    #: Atributo lido no nó encontrado; usa o texto quando ausente.
    attribute: Optional[str] = None
    #: Quando verdadeiro, processa todos os nós encontrados.
    multiple: StrictBool = False
    before: Optional[str] = None
    after: Optional[str] = None
    #: Seletores filhos; sua presença transforma o item em contêiner.
    elements: Optional[List["ElementPayload"]] = None

    @model_validator(mode="before")
    @classmethod
    def _require_selector(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("selector") is None:
            raise ValueError('"selector" is required')
        return data

    @field_validator("selector")
    @classmethod
    def _selector_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('"selector" can\'t be empty')
        return value

    @field_validator("elements")
    @classmethod
    def _children_not_empty(
        cls, value: Optional[List["ElementPayload"]]
    ) -> Optional[List["ElementPayload"]]:
        if value is not None and not value:
            raise ValueError('"elements" can\'t be empty')
        return value

    def to_domain(self) -> ElementSpec:
        """Converte o payload validado em ``Leaf`` ou ``Container``."""

        if self.elements is not None:
            return Container(
                selector=self.selector,
                children=tuple(child.to_domain() for child in self.elements),
                multiple=self.multiple,
                attribute=self.attribute,
                before=self.before,
                after=self.after,
            )
        return Leaf(
            selector=self.selector,
            attribute=self.attribute,
            multiple=self.multiple,
            before=self.before,
            after=self.after,
        )


class PageConfigPayload(BaseModel):
    """Estrutura de uma página alvo dentro do arquivo de configuração."""

    model_config = ConfigDict(extra="ignore")

    #: URL absoluta visitada durante a extração.
    url: str
    #: Seletores de primeiro nível, obrigatoriamente não vazios.
    elements: List[ElementPayload]

    @model_validator(mode="before")
    @classmethod
    def _require_url(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("url") is None:
            raise ValueError('"url" is required')
        return data

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"invalid url: {value!r}")
        return value

    @field_validator("elements")
    @classmethod
    def _elements_not_empty(cls, value: List[ElementPayload]) -> List[ElementPayload]:
        if not value:
            raise ValueError('"elements" can\'t be empty')
        return value

    def to_domain(self) -> PageConfig:
        return PageConfig(
            url=self.url,
            elements=tuple(element.to_domain() for element in self.elements),
        )


ElementPayload.model_rebuild()


__all__ = ["ElementPayload", "PageConfigPayload"]
