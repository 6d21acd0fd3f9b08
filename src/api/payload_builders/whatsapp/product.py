"""Builder para produto de catálogo (interactive + productMessage).

Falha no upload da thumbnail não aborta o envio: o produto segue sem imagem
(`productImageCount = 0`) e o fallback fica registrado em log.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import build_media_source
from app.constants.whatsapp import MediaKind
from config.defaults import get_kind_defaults
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.domain.content import ProductContent
    from app.protocols.media_uploader import MediaUploaderProtocol
    from app.protocols.message_generator import MessageGeneratorProtocol
    from config.defaults import KindDefaults

logger = logging.getLogger(__name__)


class ProductPayloadBuilder:
    """Builder de produto dentro de envelope viewOnce."""

    def __init__(
        self,
        generator: MessageGeneratorProtocol,
        uploader: MediaUploaderProtocol,
        defaults: KindDefaults | None = None,
    ) -> None:
        self._generator = generator
        self._uploader = uploader
        self._defaults = defaults

    async def build(self, content: ProductContent) -> dict[str, Any]:
        """Constrói o fragmento de produto.

        Args:
            content: Dados do produto

        Returns:
            Fragmento `{"viewOnceMessage": {"message": {"interactiveMessage": ...}}}`
        """
        defaults = (self._defaults or get_kind_defaults()).product
        product_image = await self._upload_thumbnail(content)

        product = {
            "productId": content.product_id,
            "title": content.title,
            "description": content.description,
            "currencyCode": content.currency_code or defaults.currency,
            "priceAmount1000": content.price_amount_1000,
            "retailerId": content.retailer_id,
            "url": content.url,
            "productImage": product_image,
            "productImageCount": 1 if product_image else 0,
        }

        return {
            "viewOnceMessage": {
                "message": {
                    "interactiveMessage": {
                        "body": {"text": content.body},
                        "footer": {"text": content.footer},
                        "header": {
                            "title": content.title,
                            "hasMediaAttachment": bool(product_image),
                            "productMessage": {
                                "product": product,
                                "businessOwnerJid": defaults.business_owner_jid,
                            },
                        },
                        "nativeFlowMessage": {"buttons": list(content.buttons)},
                    }
                }
            }
        }

    async def _upload_thumbnail(self, content: ProductContent) -> dict[str, Any] | None:
        if content.thumbnail is None:
            return None

        source = build_media_source(MediaKind.IMAGE, content.thumbnail)
        try:
            result = await self._generator.generate_wa_message_content(
                source, upload=self._uploader
            )
        except Exception as exc:
            log_fallback(
                logger,
                "product_thumbnail",
                reason="upload_failed",
                error_type=type(exc).__name__,
            )
            return None

        return _extract_image_message(result)


def _extract_image_message(result: Any) -> dict[str, Any] | None:
    if not isinstance(result, dict):
        return None
    image = result.get("imageMessage")
    if image:
        return image
    inner = result.get("message")
    if isinstance(inner, dict):
        return inner.get("imageMessage") or None
    return None
