"""Protocolo do serviço de upload de mídia."""

from __future__ import annotations

from typing import Any, Protocol


class MediaUploaderProtocol(Protocol):
    """Callable de upload repassado aos geradores de conteúdo.

    O formato do retorno é opaco para o composer; apenas os geradores o
    interpretam.
    """

    async def __call__(self, data: bytes, **options: Any) -> dict[str, Any]: ...
