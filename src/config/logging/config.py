"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap/)
    configure_logging(level="INFO", service_name="compose-relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("album_parent_relayed", extra={"expected_images": 2})
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from config.logging.filters import ComposeIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "compose-relay"


def _resolve_level(level: str) -> str:
    normalized = level.upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return normalized


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    compose_id_getter: Callable[[], str] | None = None,
    *,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Instala um único handler JSON no root logger.

    Chamadas repetidas substituem o handler anterior (sem duplicar saída).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Valor do campo `service` em todo record.
        compose_id_getter: Retorna o compose_id do contexto atual.
        stream: Destino da saída (padrão: stderr).

    Returns:
        O handler instalado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    resolved = _resolve_level(level)

    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ComposeIdFilter(service_name, compose_id_getter))

    root = logging.getLogger()
    root.setLevel(resolved)
    root.handlers = [handler]
    return handler


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
    error_type: str | None = None,
) -> None:
    """Registra que um caminho de degradação foi usado (sem PII).

    Ex.: produto enviado sem imagem porque o upload da thumbnail falhou.
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms
    if error_type:
        extra["error_type"] = error_type

    logger.warning("Fallback applied for %s", component, extra=extra)
