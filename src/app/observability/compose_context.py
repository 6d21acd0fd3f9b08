"""compose_id por chamada de composição.

Cada `compose` define um compose_id novo; todos os logs emitidos durante a
chamada (inclusive relays de filhos de álbum) carregam o mesmo valor.
Usa ContextVar, então chamadas concorrentes não compartilham estado.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_compose_id: ContextVar[str] = ContextVar("compose_id", default="")


def get_compose_id() -> str:
    """Retorna o compose_id do contexto atual (ou string vazia)."""
    return _compose_id.get()


def set_compose_id(compose_id: str | None = None) -> Token[str]:
    """Define o compose_id no contexto atual.

    Args:
        compose_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_compose_id().
    """
    return _compose_id.set(compose_id or uuid.uuid4().hex)


def reset_compose_id(token: Token[str]) -> None:
    """Restaura o compose_id ao valor anterior."""
    _compose_id.reset(token)
