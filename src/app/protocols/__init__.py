"""Protocolos e contratos do core da aplicação."""

from .media_uploader import MediaUploaderProtocol
from .message_generator import MessageGeneratorProtocol
from .models import AlbumRelayResult, GeneratedMessage, MessageKey, QuotedMessage
from .relay import MessageRelayProtocol

__all__ = [
    "AlbumRelayResult",
    "GeneratedMessage",
    "MediaUploaderProtocol",
    "MessageGeneratorProtocol",
    "MessageKey",
    "MessageRelayProtocol",
    "QuotedMessage",
]
