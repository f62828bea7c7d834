"""Esquemas de validação da configuração de extração."""
from .config_file_payload import ConfigFilePayload
from .element_payload import ElementPayload, PageConfigPayload

__all__ = ["ConfigFilePayload", "ElementPayload", "PageConfigPayload"]
