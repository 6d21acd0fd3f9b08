"""Exceções de domínio para composição e relay de mensagens.

Cada erro carrega o `kind` (tipo de conteúdo) quando conhecido, para que o
chamador possa registrar a falha sem inspecionar o payload (sem PII).
"""

from __future__ import annotations


class ComposeError(RuntimeError):
    """Base para falhas de composição/relay."""

    def __init__(self, message: str, *, kind: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class ClassificationError(ComposeError):
    """Nenhum campo indicador de tipo reconhecido no conteúdo."""


class MissingFieldError(ComposeError):
    """Campo obrigatório do tipo de conteúdo ausente ou inválido."""


class EmptyInputError(ComposeError):
    """Álbum recebido sem itens."""


class MediaUploadError(ComposeError):
    """Falha ao gerar/enviar mídia pelo colaborador de upload."""


class RelayError(ComposeError):
    """Falha do colaborador de transporte ao fazer relay da mensagem."""
