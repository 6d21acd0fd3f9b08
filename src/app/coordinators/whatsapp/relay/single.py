"""Relays de disparo único: evento, resultado de enquete e status de grupo.

Cada tipo gera um fragmento, emite exatamente um relay e retorna a mensagem
com sua chave. Sem filhos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.whatsapp import ContentKind
from app.coordinators.whatsapp.relay.transport import generate_or_raise, issue_relay
from app.protocols.models import GeneratedMessage, MessageKey

if TYPE_CHECKING:
    from api.payload_builders.whatsapp.factory import PayloadBuilderSet
    from app.domain.content import EventContent, GroupStoryContent, PollResultContent
    from app.protocols.message_generator import MessageGeneratorProtocol
    from app.protocols.models import QuotedMessage
    from app.protocols.relay import MessageRelayProtocol

logger = logging.getLogger(__name__)


class SingleRelayCoordinator:
    """Gera e entrega mensagens de um único relay."""

    def __init__(
        self,
        *,
        generator: MessageGeneratorProtocol,
        relay: MessageRelayProtocol,
        builders: PayloadBuilderSet,
    ) -> None:
        self._generator = generator
        self._relay = relay
        self._builders = builders

    async def send_event(
        self,
        content: EventContent,
        chat_id: str,
        quoted: QuotedMessage | None = None,
    ) -> GeneratedMessage:
        """Envia evento de calendário (viewOnce + secret novo)."""
        template = self._builders.event.build(content)
        message = await generate_or_raise(
            self._generator.generate_wa_message_from_content(chat_id, template, quoted=quoted),
            kind=ContentKind.EVENT,
            description="mensagem de evento",
        )
        await self._relay_single(ContentKind.EVENT, chat_id, message)
        return message

    async def send_poll_result(
        self,
        content: PollResultContent,
        chat_id: str,
        quoted: QuotedMessage | None = None,
    ) -> GeneratedMessage:
        """Envia snapshot de resultado de enquete."""
        template = self._builders.poll_result.build(content)
        message = await generate_or_raise(
            self._generator.generate_wa_message_from_content(
                chat_id, template, user_jid=chat_id, quoted=quoted
            ),
            kind=ContentKind.POLL_RESULT,
            description="snapshot de enquete",
        )
        await self._relay_single(ContentKind.POLL_RESULT, chat_id, message)
        return message

    async def send_group_story(
        self,
        content: GroupStoryContent,
        chat_id: str,
    ) -> GeneratedMessage:
        """Envia status de grupo com ID de mensagem novo."""
        message = await self._builders.group_story.build(content)
        message_id = self._generator.generate_message_id()
        relayed_id = await issue_relay(
            self._relay,
            chat_id,
            message,
            message_id=message_id,
            kind=ContentKind.GROUP_STORY,
            role="single",
        )
        return GeneratedMessage(
            message=message,
            key=MessageKey(remote_jid=chat_id, id=relayed_id or message_id),
        )

    async def _relay_single(
        self,
        kind: ContentKind,
        chat_id: str,
        message: GeneratedMessage,
    ) -> None:
        await issue_relay(
            self._relay,
            chat_id,
            message.message,
            message_id=message.key.id,
            kind=kind,
            role="single",
        )
        logger.debug("single_relay_issued", extra={"kind": str(kind)})
