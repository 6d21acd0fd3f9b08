"""Builder para status de grupo (groupStatusMessageV2)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import get_content_type
from app.constants.whatsapp import ContentKind
from utils.errors import ComposeError, MediaUploadError

if TYPE_CHECKING:
    from app.domain.content import GroupStoryContent
    from app.protocols.media_uploader import MediaUploaderProtocol
    from app.protocols.message_generator import MessageGeneratorProtocol

logger = logging.getLogger(__name__)


class GroupStoryPayloadBuilder:
    """Gera o conteúdo do status e o envolve no envelope V2."""

    def __init__(
        self,
        generator: MessageGeneratorProtocol,
        uploader: MediaUploaderProtocol,
    ) -> None:
        self._generator = generator
        self._uploader = uploader

    async def build(self, content: GroupStoryContent) -> dict[str, Any]:
        """Constrói a mensagem `{"groupStatusMessageV2": {"message": ...}}`.

        Raises:
            MediaUploadError: Se a geração do conteúdo falhar
        """
        try:
            generated = await self._generator.generate_wa_message_content(
                content.content, upload=self._uploader
            )
        except ComposeError:
            raise
        except Exception as exc:
            raise MediaUploadError(
                "Falha ao gerar conteúdo do status de grupo",
                kind=ContentKind.GROUP_STORY,
            ) from exc

        inner = generated.get("message") or generated
        logger.debug(
            "group_story_content_generated",
            extra={"content_type": get_content_type(inner)},
        )
        return {"groupStatusMessageV2": {"message": inner}}
