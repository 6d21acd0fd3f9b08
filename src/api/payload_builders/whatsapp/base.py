"""Helpers compartilhados pelos builders de fragmentos WhatsApp."""

from __future__ import annotations

import secrets
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.domain.content import MediaLocator
from config.settings import MESSAGE_SECRET_SIZE

if TYPE_CHECKING:
    from app.constants.whatsapp import MediaKind
    from app.domain.content import MediaSource
    from app.protocols.models import QuotedMessage


def new_message_secret() -> bytes:
    """Gera um messageSecret aleatório novo (nunca reutilizar nem logar)."""
    return secrets.token_bytes(MESSAGE_SECRET_SIZE)


def build_message_context_info(**extra: Any) -> dict[str, Any]:
    """Monta messageContextInfo com secret novo e campos adicionais."""
    return {"messageSecret": new_message_secret(), **extra}


def build_quote_context(
    quoted: QuotedMessage | None,
    fallback_participant: str | None = None,
) -> dict[str, Any]:
    """Monta contextInfo de reply a partir da mensagem citada.

    Args:
        quoted: Mensagem citada (opcional)
        fallback_participant: Participante usado quando a chave citada não tem

    Returns:
        Dict com stanzaId, participant e quotedMessage (apenas os presentes)
    """
    context = {
        "stanzaId": quoted.key.id if quoted else None,
        "participant": (quoted.key.participant if quoted else None) or fallback_participant,
        "quotedMessage": quoted.message if quoted else None,
    }
    return {key: value for key, value in context.items() if value is not None}


def build_media_source(kind: MediaKind, media: MediaSource) -> dict[str, Any]:
    """Converte MediaSource no formato aceito pelos geradores de conteúdo.

    Bytes vão direto; localizadores viram `{"url": ...}`.
    """
    if isinstance(media, MediaLocator):
        return {str(kind): {"url": media.url}}
    return {str(kind): media}


def media_payload(media: MediaSource) -> bytes | dict[str, str]:
    """Retorna o valor bruto da mídia (bytes ou `{"url": ...}`)."""
    if isinstance(media, MediaLocator):
        return {"url": media.url}
    return media


def get_content_type(message: Mapping[str, Any] | None) -> str | None:
    """Retorna a primeira chave de conteúdo de uma mensagem.

    Aceita tanto a mensagem quanto um envelope com campo `message`.
    """
    if not isinstance(message, Mapping):
        return None
    inner = message.get("message")
    content = inner if isinstance(inner, Mapping) else message
    return next(iter(content), None)
