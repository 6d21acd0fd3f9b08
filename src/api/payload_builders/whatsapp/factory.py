"""Factory que monta o conjunto de builders por tipo de conteúdo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.payload_builders.whatsapp.event import EventPayloadBuilder
from api.payload_builders.whatsapp.group_story import GroupStoryPayloadBuilder
from api.payload_builders.whatsapp.interactive import InteractivePayloadBuilder
from api.payload_builders.whatsapp.payment import PaymentPayloadBuilder
from api.payload_builders.whatsapp.poll_result import PollResultPayloadBuilder
from api.payload_builders.whatsapp.product import ProductPayloadBuilder

if TYPE_CHECKING:
    from app.protocols.media_uploader import MediaUploaderProtocol
    from app.protocols.message_generator import MessageGeneratorProtocol
    from config.defaults import KindDefaults


@dataclass(frozen=True, slots=True)
class PayloadBuilderSet:
    """Builders de fragmento, um por tipo de conteúdo."""

    payment: PaymentPayloadBuilder
    product: ProductPayloadBuilder
    interactive: InteractivePayloadBuilder
    event: EventPayloadBuilder
    poll_result: PollResultPayloadBuilder
    group_story: GroupStoryPayloadBuilder


def create_payload_builders(
    generator: MessageGeneratorProtocol,
    uploader: MediaUploaderProtocol,
    defaults: KindDefaults | None = None,
) -> PayloadBuilderSet:
    """Cria os builders compartilhando gerador, uploader e defaults.

    Args:
        generator: Utilitários de geração de conteúdo/mensagem
        uploader: Callable de upload repassado aos geradores
        defaults: Tabela de defaults (None = carregada do YAML sob demanda)
    """
    return PayloadBuilderSet(
        payment=PaymentPayloadBuilder(defaults),
        product=ProductPayloadBuilder(generator, uploader, defaults),
        interactive=InteractivePayloadBuilder(generator, uploader, defaults),
        event=EventPayloadBuilder(defaults),
        poll_result=PollResultPayloadBuilder(),
        group_story=GroupStoryPayloadBuilder(generator, uploader),
    )
