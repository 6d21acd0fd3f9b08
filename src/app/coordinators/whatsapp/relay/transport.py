"""Emissão de relay com mapeamento de erros do colaborador de transporte."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.observability import record_relay
from utils.errors import ComposeError, MediaUploadError, RelayError

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from app.constants.whatsapp import ContentKind
    from app.protocols.models import GeneratedMessage, QuotedMessage
    from app.protocols.relay import MessageRelayProtocol

logger = logging.getLogger(__name__)


async def issue_relay(
    relay: MessageRelayProtocol,
    chat_id: str,
    message: dict[str, Any],
    *,
    message_id: str,
    kind: ContentKind,
    role: str,
    quoted: QuotedMessage | GeneratedMessage | None = None,
) -> str:
    """Entrega a mensagem ao transporte.

    Args:
        relay: Colaborador de transporte
        chat_id: Chat de destino
        message: Mensagem construída
        message_id: ID atribuído à mensagem
        kind: Tipo de conteúdo (para logs/métricas)
        role: "parent", "child" ou "single"
        quoted: Mensagem citada (opcional)

    Returns:
        Resultado do transporte (ID aceito)

    Raises:
        RelayError: Se o transporte falhar
    """
    try:
        result = await relay.relay_message(
            chat_id, message, message_id=message_id, quoted=quoted
        )
    except ComposeError:
        raise
    except Exception as exc:
        logger.warning(
            "relay_failed",
            extra={"kind": str(kind), "role": role, "error_type": type(exc).__name__},
        )
        raise RelayError(f"Falha no relay da mensagem {message_id}", kind=kind) from exc

    record_relay(str(kind), role)
    return result


async def generate_or_raise(
    operation: Awaitable[GeneratedMessage],
    *,
    kind: ContentKind,
    description: str,
) -> GeneratedMessage:
    """Aguarda um gerador de mensagem convertendo falhas em MediaUploadError."""
    try:
        return await operation
    except ComposeError:
        raise
    except Exception as exc:
        logger.warning(
            "message_generation_failed",
            extra={"kind": str(kind), "error_type": type(exc).__name__},
        )
        raise MediaUploadError(f"Falha ao gerar {description}", kind=kind) from exc
