"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas
posteriormente pelo coletor de logs.

Métricas suportadas:
- Latência: tempo de execução de uma composição por tipo
- Relay: contador de relays emitidos por tipo e papel (parent/child/single)

Uso:
    from app.observability.metrics import record_latency, record_relay

    start = time.perf_counter()
    # ... operação ...
    record_latency("composer", "album", (time.perf_counter() - start) * 1000)
    record_relay("album", "child")
"""

from __future__ import annotations

import logging

from app.observability.compose_context import get_compose_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    *,
    success: bool = True,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "composer")
        operation: Nome da operação (ex: tipo de conteúdo "album")
        latency_ms: Latência em milissegundos
        success: False quando a operação terminou com erro
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "success": success,
            "compose_id": get_compose_id(),
        },
    )


def record_relay(kind: str, role: str) -> None:
    """Registra um relay emitido.

    Args:
        kind: Tipo de conteúdo (ex: "album", "event")
        role: Papel da mensagem ("parent", "child" ou "single")
    """
    logger.info(
        "metric_relay",
        extra={
            "metric_type": "relay",
            "kind": kind,
            "role": role,
            "compose_id": get_compose_id(),
        },
    )
