"""Configurações compartilhadas carregadas a partir de variáveis de ambiente."""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_CONFIG_DIR = "config"
_DEFAULT_MAX_WORKERS = 8
_DEFAULT_REQUEST_TIMEOUT = 30.0
_DEFAULT_LOG_LEVEL = "INFO"
_DEFAULT_API_BIND_HOST = "0.0.0.0"
_DEFAULT_API_PORT = 8000


@lru_cache(maxsize=None)
def get_config_dir() -> Path:
    """Retorna o diretório com os arquivos JSON de configuração."""

    return Path(os.getenv("GARIMPO_CONFIG_DIR", _DEFAULT_CONFIG_DIR))


@lru_cache(maxsize=None)
def get_max_workers() -> int:
    """Retorna quantas páginas podem ser processadas em paralelo."""

    return max(1, int(os.getenv("GARIMPO_MAX_WORKERS", _DEFAULT_MAX_WORKERS)))


@lru_cache(maxsize=None)
def get_request_timeout() -> float:
    """Retorna o timeout, em segundos, das requisições HTTP."""

    return float(os.getenv("GARIMPO_REQUEST_TIMEOUT", _DEFAULT_REQUEST_TIMEOUT))


@lru_cache(maxsize=None)
def get_log_level() -> str:
    """Retorna o nível de log padrão da linha de comando."""

    return os.getenv("GARIMPO_LOG_LEVEL", _DEFAULT_LOG_LEVEL)


@lru_cache(maxsize=None)
def get_api_port() -> int:
    """Retorna a porta configurada para expor a API."""

    return int(os.getenv("GARIMPO_API_PORT", os.getenv("PORT", _DEFAULT_API_PORT)))


@lru_cache(maxsize=None)
def get_api_bind_host() -> str:
    """Retorna o host utilizado pelo Uvicorn para escutar conexões."""

    return os.getenv("GARIMPO_API_BIND_HOST", _DEFAULT_API_BIND_HOST)


__all__ = [
    "get_api_bind_host",
    "get_api_port",
    "get_config_dir",
    "get_log_level",
    "get_max_workers",
    "get_request_timeout",
]
