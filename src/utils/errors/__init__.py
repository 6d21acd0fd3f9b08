"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ClassificationError,
    ComposeError,
    EmptyInputError,
    MediaUploadError,
    MissingFieldError,
    RelayError,
)

__all__ = [
    "ClassificationError",
    "ComposeError",
    "EmptyInputError",
    "MediaUploadError",
    "MissingFieldError",
    "RelayError",
]
