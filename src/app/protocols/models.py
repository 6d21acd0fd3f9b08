"""Modelos de protocolo trocados com os colaboradores de geração e relay.

`message` é sempre um dict com chaves camelCase do schema do protocolo;
a codificação para o wire fica a cargo do colaborador de transporte.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class MessageKey:
    """Identificador de uma mensagem enviada (chat, id e participante)."""

    remote_jid: str
    id: str
    from_me: bool = True
    participant: str | None = None

    def to_wire(self) -> dict[str, Any]:
        """Retorna a chave no formato do schema (camelCase)."""
        wire: dict[str, Any] = {
            "remoteJid": self.remote_jid,
            "fromMe": self.from_me,
            "id": self.id,
        }
        if self.participant:
            wire["participant"] = self.participant
        return wire


@dataclass(frozen=True, slots=True)
class GeneratedMessage:
    """Mensagem completa com chave atribuída (ainda não necessariamente enviada)."""

    message: dict[str, Any]
    key: MessageKey


@dataclass(frozen=True, slots=True)
class QuotedMessage:
    """Referência somente-leitura a uma mensagem anterior usada como reply."""

    key: MessageKey
    message: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class AlbumRelayResult:
    """Resultado da orquestração de álbum: pai e filhos na ordem de relay."""

    parent: GeneratedMessage
    children: tuple[GeneratedMessage, ...] = field(default_factory=tuple)

    @property
    def key(self) -> MessageKey:
        """Chave da mensagem pai do álbum."""
        return self.parent.key
