"""Builders de fragmentos de mensagem WhatsApp.

Este pacote contém builders especializados por tipo de conteúdo. Nenhum
builder emite relay: o relay fica em app/coordinators/whatsapp/relay.
"""

from api.payload_builders.whatsapp.base import (
    build_message_context_info,
    build_quote_context,
    get_content_type,
    new_message_secret,
)
from api.payload_builders.whatsapp.event import EventPayloadBuilder
from api.payload_builders.whatsapp.factory import (
    PayloadBuilderSet,
    create_payload_builders,
)
from api.payload_builders.whatsapp.group_story import GroupStoryPayloadBuilder
from api.payload_builders.whatsapp.interactive import InteractivePayloadBuilder
from api.payload_builders.whatsapp.payment import PaymentPayloadBuilder
from api.payload_builders.whatsapp.poll_result import PollResultPayloadBuilder
from api.payload_builders.whatsapp.product import ProductPayloadBuilder

__all__ = [
    "EventPayloadBuilder",
    "GroupStoryPayloadBuilder",
    "InteractivePayloadBuilder",
    "PayloadBuilderSet",
    "PaymentPayloadBuilder",
    "PollResultPayloadBuilder",
    "ProductPayloadBuilder",
    "build_message_context_info",
    "build_quote_context",
    "create_payload_builders",
    "get_content_type",
    "new_message_secret",
]
