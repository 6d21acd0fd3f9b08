"""Use cases específicos de WhatsApp."""

from .compose_message import ComposeMessageUseCase, ComposeResult

__all__ = [
    "ComposeMessageUseCase",
    "ComposeResult",
]
