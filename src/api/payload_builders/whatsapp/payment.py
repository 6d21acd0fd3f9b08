"""Builder para pedidos de pagamento (requestPaymentMessage)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import build_quote_context
from app.constants.whatsapp import ContentKind
from config.defaults import get_kind_defaults
from utils.errors import MissingFieldError

if TYPE_CHECKING:
    from app.domain.content import PaymentContent
    from app.protocols.models import QuotedMessage
    from config.defaults import KindDefaults


class PaymentPayloadBuilder:
    """Builder de requestPaymentMessage com nota em sticker ou texto."""

    def __init__(self, defaults: KindDefaults | None = None) -> None:
        self._defaults = defaults

    def build(
        self,
        content: PaymentContent | None,
        quoted: QuotedMessage | None = None,
    ) -> dict[str, Any]:
        """Constrói o fragmento de pedido de pagamento.

        Args:
            content: Dados do pagamento
            quoted: Mensagem citada para o contexto da nota (opcional)

        Returns:
            Fragmento `{"requestPaymentMessage": {...}}`

        Raises:
            MissingFieldError: Se os dados de pagamento estiverem ausentes
        """
        if content is None:
            raise MissingFieldError(
                "requestPaymentMessage ausente", kind=ContentKind.PAYMENT
            )

        defaults = (self._defaults or get_kind_defaults()).payment
        context_info = build_quote_context(quoted, content.sender)

        return {
            "requestPaymentMessage": {
                "expiryTimestamp": content.expiry or defaults.expiry_timestamp,
                "amount1000": content.amount or defaults.amount_1000,
                "currencyCodeIso4217": content.currency or defaults.currency,
                "requestFrom": content.request_from or defaults.request_from,
                "noteMessage": _build_note(content, context_info),
                "background": (
                    content.background
                    if content.background is not None
                    else dict(defaults.background)
                ),
            }
        }


def _build_note(content: PaymentContent, context_info: dict[str, Any]) -> dict[str, Any]:
    # Sticker tem precedência sobre nota em texto
    if content.sticker is not None and content.sticker.sticker_message:
        return {
            "stickerMessage": {**content.sticker.sticker_message, "contextInfo": context_info}
        }
    if content.note:
        return {"extendedTextMessage": {"text": content.note, "contextInfo": context_info}}
    return {}
