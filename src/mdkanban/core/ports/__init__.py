"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .document_parser import DocumentParserPort
from .document_formatter import DocumentFormatterPort
from .detail_store import DetailStorePort
from .config_provider import AppConfig, ConfigProviderPort

__all__ = [
    "DocumentParserPort",
    "DocumentFormatterPort",
    "DetailStorePort",
    "AppConfig",
    "ConfigProviderPort",
]
