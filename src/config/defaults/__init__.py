"""Política centralizada de defaults por tipo de conteúdo."""

from config.defaults.loader import (
    DEFAULTS_PATH,
    KindDefaultsError,
    clear_cache,
    get_kind_defaults,
    load_kind_defaults,
)
from config.defaults.models import (
    AlbumDefaults,
    EventDefaults,
    InteractiveDefaults,
    KindDefaults,
    PaymentDefaults,
    ProductDefaults,
)

__all__ = [
    "DEFAULTS_PATH",
    "AlbumDefaults",
    "EventDefaults",
    "InteractiveDefaults",
    "KindDefaults",
    "KindDefaultsError",
    "PaymentDefaults",
    "ProductDefaults",
    "clear_cache",
    "get_kind_defaults",
    "load_kind_defaults",
]
