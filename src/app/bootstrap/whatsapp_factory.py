"""Factory de wiring para o composer WhatsApp (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.whatsapp.factory import create_payload_builders
from app.coordinators.whatsapp.relay.album import AlbumRelayCoordinator
from app.coordinators.whatsapp.relay.single import SingleRelayCoordinator
from app.use_cases.whatsapp.compose_message import ComposeMessageUseCase

if TYPE_CHECKING:
    from app.protocols.media_uploader import MediaUploaderProtocol
    from app.protocols.message_generator import MessageGeneratorProtocol
    from app.protocols.relay import MessageRelayProtocol
    from config.defaults import KindDefaults


def create_compose_use_case(
    *,
    generator: MessageGeneratorProtocol,
    relay: MessageRelayProtocol,
    uploader: MediaUploaderProtocol,
    defaults: KindDefaults | None = None,
) -> ComposeMessageUseCase:
    """Cria o use case de composição com dependências injetadas.

    Args:
        generator: Utilitários de geração de conteúdo/mensagem
        relay: Transporte que entrega as mensagens construídas
        uploader: Callable de upload repassado aos geradores
        defaults: Tabela de defaults (None = carregada do YAML)
    """
    builders = create_payload_builders(generator, uploader, defaults)
    return ComposeMessageUseCase(
        builders=builders,
        album=AlbumRelayCoordinator(
            generator=generator,
            relay=relay,
            uploader=uploader,
            defaults=defaults,
        ),
        single=SingleRelayCoordinator(
            generator=generator,
            relay=relay,
            builders=builders,
        ),
    )
