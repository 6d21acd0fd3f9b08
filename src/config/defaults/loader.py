"""Loader da política de defaults por tipo de conteúdo.

Carrega `kind_defaults.yaml` (ou o arquivo apontado por
COMPOSER_DEFAULTS_FILE) e valida com Pydantic.

Uso:
    from config.defaults import get_kind_defaults

    defaults = get_kind_defaults()
    currency = content.currency or defaults.payment.currency
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from config.defaults.models import KindDefaults
from config.settings import get_composer_settings

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).resolve().parent / "kind_defaults.yaml"


class KindDefaultsError(Exception):
    """Erro de formato na tabela de defaults."""


def load_kind_defaults(path: Path) -> KindDefaults:
    """Carrega e valida a tabela de defaults de um arquivo YAML.

    Arquivo ausente, YAML inválido ou valores fora do schema resultam no
    fallback embutido (`KindDefaults()`), com log.

    Raises:
        KindDefaultsError: Se o YAML não for um dicionário.
    """
    if not path.exists():
        logger.warning("kind_defaults_file_not_found", extra={"path": str(path)})
        return KindDefaults()

    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        logger.error("kind_defaults_yaml_error", extra={"error": str(exc)})
        return KindDefaults()

    if raw is None:
        return KindDefaults()
    if not isinstance(raw, dict):
        raise KindDefaultsError("YAML de defaults deve ser um dicionário")

    try:
        return KindDefaults.model_validate(raw)
    except ValidationError as exc:
        logger.error(
            "kind_defaults_invalid",
            extra={"error_count": exc.error_count(), "path": str(path)},
        )
        return KindDefaults()


@lru_cache(maxsize=1)
def get_kind_defaults() -> KindDefaults:
    """Retorna a tabela de defaults (cached)."""
    override = get_composer_settings().defaults_file
    path = Path(override) if override else DEFAULTS_PATH
    defaults = load_kind_defaults(path)
    logger.debug("kind_defaults_loaded", extra={"path": str(path)})
    return defaults


def clear_cache() -> None:
    """Limpa cache da tabela de defaults (útil em testes)."""
    get_kind_defaults.cache_clear()
