"""Enums e constantes de protocolo para composição de mensagens WhatsApp."""

from __future__ import annotations

from enum import StrEnum


class ContentKind(StrEnum):
    """Tipos de conteúdo reconhecidos pelo classificador."""

    PAYMENT = "payment"
    PRODUCT = "product"
    INTERACTIVE = "interactive"
    ALBUM = "album"
    EVENT = "event"
    POLL_RESULT = "poll_result"
    GROUP_STORY = "group_story"


# Ordem fixa de prioridade: primeiro campo indicador presente vence
KIND_INDICATOR_FIELDS: tuple[tuple[str, ContentKind], ...] = (
    ("requestPaymentMessage", ContentKind.PAYMENT),
    ("productMessage", ContentKind.PRODUCT),
    ("interactiveMessage", ContentKind.INTERACTIVE),
    ("albumMessage", ContentKind.ALBUM),
    ("eventMessage", ContentKind.EVENT),
    ("pollResultMessage", ContentKind.POLL_RESULT),
    ("groupStatusMessage", ContentKind.GROUP_STORY),
)


class MediaKind(StrEnum):
    """Slots de mídia aceitos pelos geradores de conteúdo."""

    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"


# Tipo de associação pai/filho usado por itens de álbum
ALBUM_ASSOCIATION_TYPE = 1
