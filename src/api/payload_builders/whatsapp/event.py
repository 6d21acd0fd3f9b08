"""Builder para eventos de calendário (eventMessage em viewOnce)."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import build_message_context_info
from config.defaults import get_kind_defaults

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.content import EventContent
    from config.defaults import KindDefaults


def _now_ms() -> int:
    return int(time.time() * 1000)


class EventPayloadBuilder:
    """Builder do template de evento com secret novo por chamada."""

    def __init__(
        self,
        defaults: KindDefaults | None = None,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._defaults = defaults
        self._clock = clock

    def build(self, content: EventContent) -> dict[str, Any]:
        """Constrói o template de evento.

        startTime ausente usa o instante atual; endTime ausente usa
        startTime + duração padrão (1h). Convidados extras são permitidos
        a menos que explicitamente desativados.
        """
        defaults = (self._defaults or get_kind_defaults()).event
        guests = content.extra_guests_allowed
        start_time = content.start_time or self._clock()
        end_time = content.end_time or start_time + defaults.duration_ms

        return {
            "viewOnceMessage": {
                "message": {
                    "messageContextInfo": build_message_context_info(),
                    "eventMessage": {
                        "isCanceled": content.is_canceled,
                        "name": content.name,
                        "description": content.description,
                        "location": content.location or dict(defaults.location),
                        "joinLink": content.join_link or defaults.join_link,
                        "startTime": start_time,
                        "endTime": end_time,
                        "extraGuestsAllowed": (
                            defaults.extra_guests_allowed
                            if guests is None
                            else guests is not False
                        ),
                    },
                }
            }
        }
