"""Protocolos dos geradores de conteúdo/mensagem (schema do protocolo)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .media_uploader import MediaUploaderProtocol
    from .models import GeneratedMessage, QuotedMessage


class MessageGeneratorProtocol(Protocol):
    """Contrato mínimo dos utilitários de geração de mensagens.

    Todas as operações que recebem `upload` podem acionar o upload de mídia
    e falhar com erro do colaborador.
    """

    async def generate_wa_message_content(
        self,
        source: dict[str, Any],
        *,
        upload: MediaUploaderProtocol,
    ) -> dict[str, Any]: ...

    async def prepare_wa_message_media(
        self,
        source: dict[str, Any],
        *,
        upload: MediaUploaderProtocol,
    ) -> dict[str, Any]: ...

    async def generate_wa_message_from_content(
        self,
        chat_id: str,
        content: dict[str, Any],
        *,
        user_jid: str | None = None,
        quoted: QuotedMessage | GeneratedMessage | None = None,
        upload: MediaUploaderProtocol | None = None,
    ) -> GeneratedMessage: ...

    async def generate_wa_message(
        self,
        chat_id: str,
        descriptor: dict[str, Any],
        *,
        upload: MediaUploaderProtocol,
    ) -> GeneratedMessage: ...

    def generate_message_id(self) -> str: ...
