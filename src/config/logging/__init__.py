"""Logging estruturado (JSON) do composer.

Todo record sai com asctime, level, logger, message, compose_id e service.
O compose_id correlaciona o relay do pai de um álbum com os relays dos
filhos. Corpo de mensagem e secrets nunca entram nos logs.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="compose-relay")
    logger = get_logger(__name__)
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import ComposeIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ComposeIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
