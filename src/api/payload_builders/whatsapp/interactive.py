"""Builder para cards interativos (botões, listas, native flow).

Apenas um slot de mídia entra no header. Precedência quando mais de um
estiver preenchido: imagem/thumbnail, depois vídeo, depois documento.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import build_media_source, media_payload
from app.constants.whatsapp import ContentKind, MediaKind
from app.domain.content import MediaLocator
from config.defaults import get_kind_defaults
from utils.errors import ComposeError, MediaUploadError

if TYPE_CHECKING:
    from app.domain.content import InteractiveContent
    from app.protocols.media_uploader import MediaUploaderProtocol
    from app.protocols.message_generator import MessageGeneratorProtocol
    from config.defaults import KindDefaults

logger = logging.getLogger(__name__)


def select_media_slot(
    content: InteractiveContent,
) -> tuple[MediaKind, dict[str, Any]] | None:
    """Escolhe o slot de mídia e monta a fonte para o gerador.

    Returns:
        Tupla (tipo, fonte) ou None se nenhuma mídia informada
    """
    if content.image is not None:
        return MediaKind.IMAGE, build_media_source(MediaKind.IMAGE, content.image)
    if content.thumbnail:
        thumbnail = MediaLocator(url=content.thumbnail)
        return MediaKind.IMAGE, build_media_source(MediaKind.IMAGE, thumbnail)
    if content.video is not None:
        return MediaKind.VIDEO, build_media_source(MediaKind.VIDEO, content.video)
    if content.document is not None:
        source = build_media_source(MediaKind.DOCUMENT, content.document)
        if content.jpeg_thumbnail is not None:
            source["jpegThumbnail"] = media_payload(content.jpeg_thumbnail)
        return MediaKind.DOCUMENT, source
    return None


class InteractivePayloadBuilder:
    """Builder de interactiveMessage com mídia opcional no header."""

    def __init__(
        self,
        generator: MessageGeneratorProtocol,
        uploader: MediaUploaderProtocol,
        defaults: KindDefaults | None = None,
    ) -> None:
        self._generator = generator
        self._uploader = uploader
        self._defaults = defaults

    async def build(self, content: InteractiveContent) -> dict[str, Any]:
        """Constrói o fragmento interativo.

        Args:
            content: Dados do card

        Returns:
            Fragmento `{"interactiveMessage": {...}}`

        Raises:
            MediaUploadError: Se o upload da mídia escolhida falhar
        """
        defaults = (self._defaults or get_kind_defaults()).interactive
        media = await self._prepare_media(content)

        header: dict[str, Any] = {
            "title": content.header or "",
            "hasMediaAttachment": media is not None,
        }
        if media is not None:
            header.update(media)

        interactive: dict[str, Any] = {
            "body": {"text": content.title or ""},
            "footer": {"text": content.footer or ""},
            "header": header,
            "nativeFlowMessage": {
                "buttons": list(content.buttons),
                **(content.native_flow_message or {}),
            },
        }

        if content.context_info or content.external_ad_reply:
            interactive["contextInfo"] = _merge_context_info(
                content, defaults.external_ad_reply_media_type
            )

        return {"interactiveMessage": interactive}

    async def _prepare_media(self, content: InteractiveContent) -> dict[str, Any] | None:
        selected = select_media_slot(content)
        if selected is None:
            return None

        kind, source = selected
        try:
            prepared = await self._generator.prepare_wa_message_media(
                source, upload=self._uploader
            )
        except ComposeError:
            raise
        except Exception as exc:
            logger.warning(
                "interactive_media_upload_failed",
                extra={"media_kind": str(kind), "error_type": type(exc).__name__},
            )
            raise MediaUploadError(
                f"Falha no upload de {kind} do card interativo",
                kind=ContentKind.INTERACTIVE,
            ) from exc

        slot = f"{kind}Message"
        fragment = dict(prepared.get(slot) or {})
        if kind is MediaKind.DOCUMENT:
            if content.file_name:
                fragment["fileName"] = content.file_name
            if content.mimetype:
                fragment["mimetype"] = content.mimetype
        return {slot: fragment}


def _merge_context_info(content: InteractiveContent, media_type: int) -> dict[str, Any]:
    context = dict(content.context_info or {})
    if content.external_ad_reply:
        context["externalAdReply"] = {"mediaType": media_type, **content.external_ad_reply}
    return context
