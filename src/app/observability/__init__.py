"""Observabilidade — compose_id de contexto e métricas via logs.

Uso:
    from app.observability import get_compose_id, set_compose_id
    from app.observability import record_latency, record_relay
"""

from app.observability.compose_context import (
    get_compose_id,
    reset_compose_id,
    set_compose_id,
)
from app.observability.metrics import (
    record_latency,
    record_relay,
)

__all__ = [
    "get_compose_id",
    "record_latency",
    "record_relay",
    "reset_compose_id",
    "set_compose_id",
]
