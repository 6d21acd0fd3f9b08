"""Formatter JSON dos logs do composer.

Bytes (ex.: messageSecret, mídia inline) nunca são serializados: viram
apenas o tamanho.
"""

from __future__ import annotations

from typing import Any

from pythonjsonlogger.json import JsonFormatter

# Ordem estável na saída
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "compose_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    return str(value)


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON.

    Exemplo de output:
        {"asctime": "...", "level": "INFO",
         "logger": "app.coordinators.whatsapp.relay.album",
         "message": "album_child_relayed", "compose_id": "3f0c...",
         "service": "compose-relay", "position": 2}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        json_default=_json_default,
    )
