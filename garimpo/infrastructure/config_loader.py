"""Leitura e validação dos arquivos de configuração em disco."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

from pydantic import ValidationError

from garimpo.domain.entities import LoadedConfigFile, PageConfig
from garimpo.schemas import ConfigFilePayload


class ConfigFileError(ValueError):
    """Arquivo de configuração com JSON malformado ou fora do esquema."""

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


def parse_config_file(text: str, *, name: str | None = None) -> Tuple[PageConfig, ...]:
    """Valida o conteúdo JSON de um arquivo e devolve as páginas configuradas.

    Raises:
        ConfigFileError: Quando o JSON é inválido ou viola o esquema.
    """

    try:
        payload = ConfigFilePayload.model_validate_json(text)
    except ValidationError as exc:
        raise ConfigFileError(str(exc), name=name) from exc
    return payload.to_domain()


class ConfigLoader:
    """Carrega todos os arquivos ``*.json`` de um diretório de configuração.

    Arquivos inválidos são descartados por inteiro e registrados em log; os
    demais continuam sendo carregados normalmente.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)
        self._log = logging.getLogger("garimpo.config")
        self.rejected: List[ConfigFileError] = []

    @property
    def directory(self) -> Path:
        return self._directory

    def load(self) -> List[LoadedConfigFile]:
        self.rejected = []
        if not self._directory.is_dir():
            self._log.warning("diretório de configuração %s não encontrado", self._directory)
            return []

        files: List[LoadedConfigFile] = []
        for path in sorted(self._directory.glob("*.json")):
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as exc:
                self._log.error("falha ao ler %s: %s", path, exc)
                self.rejected.append(ConfigFileError(str(exc), name=path.name))
                continue
            try:
                pages = parse_config_file(text, name=path.name)
            except ConfigFileError as exc:
                self._log.error("configuração inválida em %s: %s", path.name, exc)
                self.rejected.append(exc)
                continue
            self._log.debug("%s: %d página(s)", path.name, len(pages))
            files.append(LoadedConfigFile(name=path.name, pages=pages))
        return files


__all__ = ["ConfigFileError", "ConfigLoader", "parse_config_file"]
