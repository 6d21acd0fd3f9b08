"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta os colaboradores concretos (gerador, uploader, transporte) aos
protocolos consumidos pelo composer.

Uso:
    from app.bootstrap import initialize_app
    from app.bootstrap.whatsapp_factory import create_compose_use_case

    initialize_app()
    use_case = create_compose_use_case(
        generator=utils, relay=socket, uploader=wa_upload_to_server
    )
    result = await use_case.compose(content, chat_id)
"""

from __future__ import annotations

import logging

from app.observability import get_compose_id
from config.defaults import get_kind_defaults
from config.logging import configure_logging
from config.settings import get_base_settings, get_composer_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.

    Configura:
    - Logging estruturado JSON com compose_id
    - Validação de settings e pré-carga da tabela de defaults
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        compose_id_getter=get_compose_id,
    )
    validate_runtime_settings()
    get_kind_defaults()


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"composer: {error}" for error in get_composer_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
