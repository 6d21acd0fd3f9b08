"""Protocolo de relay (transporte/sessão)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import GeneratedMessage, QuotedMessage


class MessageRelayProtocol(Protocol):
    """Contrato mínimo para entregar uma mensagem construída ao transporte."""

    async def relay_message(
        self,
        chat_id: str,
        message: dict[str, Any],
        *,
        message_id: str,
        quoted: QuotedMessage | GeneratedMessage | None = None,
    ) -> str: ...
