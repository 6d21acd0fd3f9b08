"""Classificação de conteúdo abstrato em exatamente um tipo.

Inspeciona os campos indicadores em ordem fixa de prioridade
(payment, product, interactive, album, event, poll_result, group_story) e o
primeiro preenchido vence. Sem efeitos colaterais.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from app.constants.whatsapp import KIND_INDICATOR_FIELDS, ContentKind
from app.domain.content import (
    CONTENT_MODELS,
    AlbumContent,
    ComposeContent,
    GroupStoryContent,
    PaymentContent,
)
from utils.errors import ClassificationError, MissingFieldError


def _is_populated(value: Any) -> bool:
    # Objetos e listas contam mesmo vazios (álbum vazio precisa ser reconhecido)
    if isinstance(value, (Mapping, list)):
        return True
    return bool(value)


def classify_content(content: Mapping[str, Any] | ComposeContent) -> ContentKind | None:
    """Retorna o tipo do conteúdo ou None se nenhum indicador reconhecido.

    Args:
        content: Dict abstrato (campo indicador por tipo) ou variante tipada.

    Returns:
        ContentKind do primeiro indicador preenchido, ou None.
    """
    if isinstance(content, tuple(CONTENT_MODELS.values())):
        return content.kind
    if not isinstance(content, Mapping):
        return None

    for field_name, kind in KIND_INDICATOR_FIELDS:
        if _is_populated(content.get(field_name)):
            return kind
    return None


def parse_content(content: Mapping[str, Any] | ComposeContent) -> ComposeContent:
    """Classifica e converte o conteúdo abstrato na variante tipada.

    Raises:
        ClassificationError: Nenhum indicador reconhecido.
        MissingFieldError: Dados do tipo ausentes ou com formato inválido.
    """
    kind = classify_content(content)
    if kind is None:
        raise ClassificationError("Nenhum tipo de conteúdo reconhecido")
    if not isinstance(content, Mapping):
        return content

    field_name = _indicator_field(kind)
    data = content[field_name]
    try:
        return _build_variant(kind, data, content)
    except ValidationError as exc:
        raise MissingFieldError(
            f"Conteúdo inválido para {kind}: {exc.error_count()} erro(s)",
            kind=kind,
        ) from exc


def _indicator_field(kind: ContentKind) -> str:
    return next(name for name, k in KIND_INDICATOR_FIELDS if k is kind)


def _build_variant(
    kind: ContentKind,
    data: Any,
    content: Mapping[str, Any],
) -> ComposeContent:
    if kind is ContentKind.ALBUM:
        # Formato não-lista vira álbum vazio (rejeitado adiante)
        items = data if isinstance(data, list) else []
        return AlbumContent(items=items)

    if not isinstance(data, Mapping):
        raise MissingFieldError(f"Dados de {kind} devem ser um objeto", kind=kind)

    if kind is ContentKind.GROUP_STORY:
        return GroupStoryContent(content=dict(data))

    if kind is ContentKind.PAYMENT:
        payload = dict(data)
        if content.get("sender") and "sender" not in payload:
            payload["sender"] = content["sender"]
        return PaymentContent.model_validate(payload)

    return CONTENT_MODELS[kind].model_validate(data)
