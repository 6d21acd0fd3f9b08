"""Variantes tipadas de conteúdo para composição de mensagens.

O conteúdo abstrato chega como um dict "solto" onde o campo preenchido indica
o tipo. Aqui cada tipo vira um modelo Pydantic fechado; a união
`ComposeContent` é o conjunto completo aceito pelo dispatcher.

Os aliases seguem os nomes camelCase usados pelos chamadores (mesmos nomes do
schema do protocolo), por isso `populate_by_name=True` em todos os modelos.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.constants.whatsapp import ContentKind, MediaKind


def _coerce_media(value: Any) -> Any:
    """Converte URL em string para localizador `{"url": ...}`."""
    if isinstance(value, str):
        return {"url": value}
    return value


class MediaLocator(BaseModel):
    """Localizador remoto de mídia."""

    model_config = ConfigDict(extra="ignore")

    url: str = Field(..., min_length=1)


MediaSource = bytes | MediaLocator


class _ContentModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    kind: ClassVar[ContentKind]


class StickerNote(BaseModel):
    """Nota de pagamento em forma de sticker já gerado."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    sticker_message: dict[str, Any] | None = Field(None, alias="stickerMessage")


class PaymentContent(_ContentModel):
    """Pedido de pagamento (requestPaymentMessage)."""

    kind: ClassVar[ContentKind] = ContentKind.PAYMENT

    expiry: int | None = None
    amount: int | None = None
    currency: str | None = None
    request_from: str | None = Field(None, alias="from")
    note: str | None = None
    sticker: StickerNote | None = None
    background: dict[str, Any] | None = None
    sender: str | None = None


class ProductContent(_ContentModel):
    """Produto de catálogo com botões de ação."""

    kind: ClassVar[ContentKind] = ContentKind.PRODUCT

    title: str = ""
    description: str = ""
    thumbnail: MediaSource | None = None
    product_id: str | None = Field(None, alias="productId")
    retailer_id: str | None = Field(None, alias="retailerId")
    url: str | None = None
    body: str = ""
    footer: str = ""
    buttons: list[dict[str, Any]] = Field(default_factory=list)
    price_amount_1000: int | None = Field(None, alias="priceAmount1000")
    currency_code: str | None = Field(None, alias="currencyCode")

    @field_validator("thumbnail", mode="before")
    @classmethod
    def coerce_thumbnail(cls, value: Any) -> Any:
        return _coerce_media(value)


class InteractiveContent(_ContentModel):
    """Card interativo (botões, listas, native flow) com no máximo uma mídia."""

    kind: ClassVar[ContentKind] = ContentKind.INTERACTIVE

    title: str | None = None
    footer: str | None = None
    header: str | None = None
    thumbnail: str | None = None
    image: MediaSource | None = None
    video: MediaSource | None = None
    document: MediaSource | None = None
    mimetype: str | None = None
    file_name: str | None = Field(None, alias="fileName")
    jpeg_thumbnail: MediaSource | None = Field(None, alias="jpegThumbnail")
    context_info: dict[str, Any] | None = Field(None, alias="contextInfo")
    external_ad_reply: dict[str, Any] | None = Field(None, alias="externalAdReply")
    buttons: list[dict[str, Any]] = Field(default_factory=list)
    native_flow_message: dict[str, Any] | None = Field(None, alias="nativeFlowMessage")

    @field_validator("image", "video", "document", "jpeg_thumbnail", mode="before")
    @classmethod
    def coerce_media_slots(cls, value: Any) -> Any:
        return _coerce_media(value)


class AlbumItem(BaseModel):
    """Item de álbum: imagem ou vídeo, demais campos repassados ao gerador."""

    model_config = ConfigDict(extra="allow", frozen=True)

    image: MediaSource | None = None
    video: MediaSource | None = None

    @field_validator("image", "video", mode="before")
    @classmethod
    def coerce_slots(cls, value: Any) -> Any:
        return _coerce_media(value)

    @property
    def media_kind(self) -> MediaKind | None:
        """Slot de mídia preenchido (imagem tem precedência)."""
        if self.image is not None:
            return MediaKind.IMAGE
        if self.video is not None:
            return MediaKind.VIDEO
        return None

    def to_descriptor(self) -> dict[str, Any]:
        """Descritor do item no formato esperado pelo gerador de mensagens.

        Apenas o slot contado em `media_kind` é repassado.
        """
        losing = {"video"} if self.image is not None else None
        return self.model_dump(exclude_none=True, exclude=losing)


class AlbumContent(_ContentModel):
    """Álbum multi-mídia (pai + itens associados)."""

    kind: ClassVar[ContentKind] = ContentKind.ALBUM

    items: list[AlbumItem] = Field(default_factory=list)


class EventContent(_ContentModel):
    """Evento de calendário."""

    kind: ClassVar[ContentKind] = ContentKind.EVENT

    name: str | None = None
    description: str | None = None
    location: dict[str, Any] | None = None
    join_link: str | None = Field(None, alias="joinLink")
    start_time: int | None = Field(None, alias="startTime")
    end_time: int | None = Field(None, alias="endTime")
    # Apenas o literal False desativa convidados extras; demais valores passam sem coerção
    extra_guests_allowed: Any = Field(None, alias="extraGuestsAllowed")
    is_canceled: bool = Field(False, alias="isCanceled")


class PollVote(BaseModel):
    """Contagem de votos de uma opção de enquete."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    option_name: str = Field(..., alias="optionName")
    option_vote_count: int | str | None = Field(None, alias="optionVoteCount")


class PollResultContent(_ContentModel):
    """Snapshot de resultado de enquete."""

    kind: ClassVar[ContentKind] = ContentKind.POLL_RESULT

    name: str | None = None
    poll_votes: list[PollVote] = Field(default_factory=list, alias="pollVotes")


class GroupStoryContent(_ContentModel):
    """Status de grupo: conteúdo arbitrário repassado ao gerador."""

    kind: ClassVar[ContentKind] = ContentKind.GROUP_STORY

    content: dict[str, Any]


ComposeContent = (
    PaymentContent
    | ProductContent
    | InteractiveContent
    | AlbumContent
    | EventContent
    | PollResultContent
    | GroupStoryContent
)

CONTENT_MODELS: dict[ContentKind, type[_ContentModel]] = {
    ContentKind.PAYMENT: PaymentContent,
    ContentKind.PRODUCT: ProductContent,
    ContentKind.INTERACTIVE: InteractiveContent,
    ContentKind.ALBUM: AlbumContent,
    ContentKind.EVENT: EventContent,
    ContentKind.POLL_RESULT: PollResultContent,
    ContentKind.GROUP_STORY: GroupStoryContent,
}


__all__ = [
    "CONTENT_MODELS",
    "AlbumContent",
    "AlbumItem",
    "ComposeContent",
    "EventContent",
    "GroupStoryContent",
    "InteractiveContent",
    "MediaLocator",
    "MediaSource",
    "PaymentContent",
    "PollResultContent",
    "PollVote",
    "ProductContent",
    "StickerNote",
]
