"""Settings específicas do composer de mensagens.

Cada componente deve ter seu próprio arquivo de settings para isolamento.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Tamanho fixo do messageSecret exigido pelo protocolo (não configurável)
MESSAGE_SECRET_SIZE: int = 32


@dataclass(frozen=True)
class ComposerSettings:
    """Configurações do composer.

    Attributes:
        defaults_file: Caminho alternativo para a tabela de defaults (YAML).
            Vazio usa o arquivo embutido em config/defaults.
    """

    defaults_file: str = ""

    def validate(self) -> list[str]:
        """Valida configurações do composer.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.defaults_file and not self.defaults_file.endswith((".yaml", ".yml")):
            errors.append("COMPOSER_DEFAULTS_FILE deve apontar para um arquivo YAML")

        return errors


def _load_from_env() -> ComposerSettings:
    """Carrega ComposerSettings a partir de variáveis de ambiente."""
    return ComposerSettings(defaults_file=os.getenv("COMPOSER_DEFAULTS_FILE", ""))


@lru_cache(maxsize=1)
def get_composer_settings() -> ComposerSettings:
    """Retorna instância cacheada de ComposerSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
