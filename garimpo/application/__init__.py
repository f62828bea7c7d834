"""Serviços de aplicação do Garimpo."""
from .servico_extracao import PageExtractionService, navigation_failure_message

__all__ = ["PageExtractionService", "navigation_failure_message"]
