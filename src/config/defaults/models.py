"""Tabela declarativa de defaults por tipo de conteúdo.

Os valores padrão dos modelos espelham `kind_defaults.yaml`, de forma que
`KindDefaults()` é também o fallback quando o arquivo não pode ser lido.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _default_background() -> dict[str, Any]:
    return {"id": "DEFAULT", "placeholderArgb": 0xFFF0F0F0}


def _default_location() -> dict[str, Any]:
    return {"degreesLatitude": 0, "degreesLongitude": 0, "name": "Location"}


def _default_forwarded_newsletter() -> dict[str, Any]:
    return {
        "newsletterJid": "0@newsletter",
        "serverMessageId": 1,
        "newsletterName": "WhatsApp",
        "contentType": 1,
    }


class PaymentDefaults(BaseModel):
    """Defaults de requestPaymentMessage."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    expiry_timestamp: int = Field(default=0, ge=0)
    amount_1000: int = Field(default=0, ge=0)
    currency: str = Field(default="IDR", min_length=3, max_length=3)
    request_from: str = "0@s.whatsapp.net"
    background: dict[str, Any] = Field(default_factory=_default_background)


class ProductDefaults(BaseModel):
    """Defaults de produto de catálogo."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    currency: str = Field(default="IDR", min_length=3, max_length=3)
    business_owner_jid: str = "0@s.whatsapp.net"


class InteractiveDefaults(BaseModel):
    """Defaults de card interativo."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    external_ad_reply_media_type: int = 1


class EventDefaults(BaseModel):
    """Defaults de evento de calendário."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    duration_ms: int = Field(default=3_600_000, gt=0)
    extra_guests_allowed: bool = True
    join_link: str = ""
    location: dict[str, Any] = Field(default_factory=_default_location)


class AlbumDefaults(BaseModel):
    """Defaults dos itens de álbum."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    forwarded_newsletter: dict[str, Any] = Field(
        default_factory=_default_forwarded_newsletter
    )


class KindDefaults(BaseModel):
    """Agregado com a política de defaults de todos os tipos."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    payment: PaymentDefaults = Field(default_factory=PaymentDefaults)
    product: ProductDefaults = Field(default_factory=ProductDefaults)
    interactive: InteractiveDefaults = Field(default_factory=InteractiveDefaults)
    event: EventDefaults = Field(default_factory=EventDefaults)
    album: AlbumDefaults = Field(default_factory=AlbumDefaults)
