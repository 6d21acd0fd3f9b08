"""Agregador de settings do serviço de composição.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Composer settings
from config.settings.composer import (
    MESSAGE_SECRET_SIZE,
    ComposerSettings,
    get_composer_settings,
)

__all__ = [
    # Constants
    "MESSAGE_SECRET_SIZE",
    # Base
    "BaseSettings",
    # Composer
    "ComposerSettings",
    "Environment",
    "get_base_settings",
    "get_composer_settings",
]
