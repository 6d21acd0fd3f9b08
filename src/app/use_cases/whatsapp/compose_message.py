"""Use case de composição: classifica o conteúdo e despacha para o tipo.

Payment, product e interactive retornam apenas o fragmento (sem relay).
Album, event, poll_result e group_story emitem relay e retornam a mensagem
enviada. O resultado do handler é repassado sem transformação.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.domain.classifier import parse_content
from app.domain.content import (
    AlbumContent,
    ComposeContent,
    EventContent,
    GroupStoryContent,
    InteractiveContent,
    PaymentContent,
    PollResultContent,
    ProductContent,
)
from app.observability import record_latency, reset_compose_id, set_compose_id
from app.protocols.models import AlbumRelayResult, GeneratedMessage
from utils.errors import ComposeError

if TYPE_CHECKING:
    from api.payload_builders.whatsapp.factory import PayloadBuilderSet
    from app.coordinators.whatsapp.relay.album import AlbumRelayCoordinator
    from app.coordinators.whatsapp.relay.single import SingleRelayCoordinator
    from app.protocols.models import QuotedMessage

logger = logging.getLogger(__name__)

ComposeResult = dict[str, Any] | GeneratedMessage | AlbumRelayResult


class ComposeMessageUseCase:
    """Orquestra classificação, construção e relay por tipo de conteúdo."""

    def __init__(
        self,
        *,
        builders: PayloadBuilderSet,
        album: AlbumRelayCoordinator,
        single: SingleRelayCoordinator,
    ) -> None:
        self._builders = builders
        self._album = album
        self._single = single

    async def compose(
        self,
        content: Mapping[str, Any] | ComposeContent,
        chat_id: str,
        quoted: QuotedMessage | None = None,
    ) -> ComposeResult:
        """Compõe (e, quando aplicável, envia) a mensagem descrita.

        Args:
            content: Conteúdo abstrato (dict com campo indicador) ou variante tipada
            chat_id: Chat de destino
            quoted: Mensagem citada (opcional, nunca alterada)

        Returns:
            Fragmento (payment/product/interactive), GeneratedMessage
            (event/poll_result/group_story) ou AlbumRelayResult (album)

        Raises:
            ClassificationError: Nenhum tipo reconhecido (nenhum relay emitido)
            MissingFieldError: Dados do tipo ausentes/inválidos
            EmptyInputError: Álbum sem itens
            MediaUploadError: Falha de upload (exceto thumbnail de produto)
            RelayError: Falha no transporte
        """
        token = set_compose_id()
        start = time.perf_counter()
        operation = "unrecognized"
        success = False
        try:
            variant = parse_content(content)
            operation = str(variant.kind)
            result = await self._dispatch(variant, chat_id, quoted)
            success = True
            return result
        except ComposeError as exc:
            logger.warning(
                "compose_failed",
                extra={"kind": operation, "error_type": type(exc).__name__},
            )
            raise
        finally:
            record_latency(
                "composer",
                operation,
                (time.perf_counter() - start) * 1000,
                success=success,
            )
            reset_compose_id(token)

    async def _dispatch(
        self,
        variant: ComposeContent,
        chat_id: str,
        quoted: QuotedMessage | None,
    ) -> ComposeResult:
        if isinstance(variant, PaymentContent):
            return self._builders.payment.build(variant, quoted)
        if isinstance(variant, ProductContent):
            return await self._builders.product.build(variant)
        if isinstance(variant, InteractiveContent):
            return await self._builders.interactive.build(variant)
        if isinstance(variant, AlbumContent):
            return await self._album.send(variant, chat_id, quoted)
        if isinstance(variant, EventContent):
            return await self._single.send_event(variant, chat_id, quoted)
        if isinstance(variant, PollResultContent):
            return await self._single.send_poll_result(variant, chat_id, quoted)
        if isinstance(variant, GroupStoryContent):
            return await self._single.send_group_story(variant, chat_id)
        raise TypeError(f"Variante de conteúdo não suportada: {type(variant).__name__}")
