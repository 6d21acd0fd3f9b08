"""Orquestração de álbum: relay do pai seguido dos itens associados.

Ordem garantida:
1. A mensagem pai (contagens esperadas + secret) é gerada e entregue antes de
   qualquer item, pois os itens referenciam a chave do pai.
2. Cada item é gerado, associado ao pai e entregue na ordem de entrada,
   sequencialmente (upload + relay de um item terminam antes do próximo).

Falha de qualquer item interrompe o álbum (fail-fast); itens restantes não
são processados e relays já emitidos não são desfeitos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.payload_builders.whatsapp.base import (
    build_message_context_info,
    get_content_type,
)
from app.constants.whatsapp import ALBUM_ASSOCIATION_TYPE, ContentKind, MediaKind
from app.coordinators.whatsapp.relay.transport import generate_or_raise, issue_relay
from app.protocols.models import AlbumRelayResult, GeneratedMessage
from config.defaults import get_kind_defaults
from utils.errors import EmptyInputError, MissingFieldError

if TYPE_CHECKING:
    from app.domain.content import AlbumContent, AlbumItem
    from app.protocols.media_uploader import MediaUploaderProtocol
    from app.protocols.message_generator import MessageGeneratorProtocol
    from app.protocols.models import QuotedMessage
    from app.protocols.relay import MessageRelayProtocol
    from config.defaults import KindDefaults

logger = logging.getLogger(__name__)


class AlbumRelayCoordinator:
    """Envia um álbum multi-mídia como pai + itens associados."""

    def __init__(
        self,
        *,
        generator: MessageGeneratorProtocol,
        relay: MessageRelayProtocol,
        uploader: MediaUploaderProtocol,
        defaults: KindDefaults | None = None,
    ) -> None:
        self._generator = generator
        self._relay = relay
        self._uploader = uploader
        self._defaults = defaults

    async def send(
        self,
        content: AlbumContent,
        chat_id: str,
        quoted: QuotedMessage | None = None,
    ) -> AlbumRelayResult:
        """Envia o álbum.

        Args:
            content: Itens do álbum (imagem ou vídeo cada)
            chat_id: Chat de destino
            quoted: Mensagem citada pelo pai (opcional)

        Returns:
            AlbumRelayResult com o pai e os itens na ordem de relay

        Raises:
            EmptyInputError: Álbum sem itens (nenhum relay emitido)
            MissingFieldError: Item sem imagem nem vídeo (nenhum relay emitido)
            MediaUploadError: Falha ao gerar pai ou item
            RelayError: Falha no relay do pai ou de um item
        """
        items = content.items
        if not items:
            raise EmptyInputError("Álbum não pode ser vazio", kind=ContentKind.ALBUM)

        missing = [position for position, item in enumerate(items) if item.media_kind is None]
        if missing:
            raise MissingFieldError(
                f"Itens de álbum sem imagem ou vídeo nas posições {missing}",
                kind=ContentKind.ALBUM,
            )

        parent = await self._send_parent(items, chat_id, quoted)

        children: list[GeneratedMessage] = []
        for position, item in enumerate(items):
            child = await self._build_child(item, chat_id, parent)
            await issue_relay(
                self._relay,
                chat_id,
                child.message,
                message_id=child.key.id,
                kind=ContentKind.ALBUM,
                role="child",
                quoted=parent,
            )
            logger.info(
                "album_child_relayed",
                extra={
                    "position": position,
                    "content_type": get_content_type(child.message),
                },
            )
            children.append(child)

        return AlbumRelayResult(parent=parent, children=tuple(children))

    async def _send_parent(
        self,
        items: list[AlbumItem],
        chat_id: str,
        quoted: QuotedMessage | None,
    ) -> GeneratedMessage:
        image_count = sum(1 for item in items if item.media_kind is MediaKind.IMAGE)
        video_count = sum(1 for item in items if item.media_kind is MediaKind.VIDEO)

        parent = await generate_or_raise(
            self._generator.generate_wa_message_from_content(
                chat_id,
                {
                    "messageContextInfo": build_message_context_info(),
                    "albumMessage": {
                        "expectedImageCount": image_count,
                        "expectedVideoCount": video_count,
                    },
                },
                user_jid=chat_id,
                quoted=quoted,
                upload=self._uploader,
            ),
            kind=ContentKind.ALBUM,
            description="mensagem pai do álbum",
        )
        await issue_relay(
            self._relay,
            chat_id,
            parent.message,
            message_id=parent.key.id,
            kind=ContentKind.ALBUM,
            role="parent",
        )
        logger.info(
            "album_parent_relayed",
            extra={"expected_images": image_count, "expected_videos": video_count},
        )
        return parent

    async def _build_child(
        self,
        item: AlbumItem,
        chat_id: str,
        parent: GeneratedMessage,
    ) -> GeneratedMessage:
        defaults = (self._defaults or get_kind_defaults()).album
        generated = await generate_or_raise(
            self._generator.generate_wa_message(
                chat_id, item.to_descriptor(), upload=self._uploader
            ),
            kind=ContentKind.ALBUM,
            description=f"item de álbum ({item.media_kind})",
        )

        message = {
            **generated.message,
            "messageContextInfo": build_message_context_info(
                messageAssociation={
                    "associationType": ALBUM_ASSOCIATION_TYPE,
                    "parentMessageKey": parent.key.to_wire(),
                }
            ),
            "forwardedNewsletterMessageInfo": dict(defaults.forwarded_newsletter),
        }
        return GeneratedMessage(message=message, key=generated.key)
