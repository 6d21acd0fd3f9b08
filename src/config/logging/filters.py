"""Filter que carimba compose_id e service em cada record."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _no_compose_id() -> str:
    return ""


class ComposeIdFilter(logging.Filter):
    """Enriquece records com o compose_id ativo e o nome do serviço.

    Um compose_id passado explicitamente em `extra` tem precedência sobre o
    valor do contexto. Nunca descarta records.
    """

    def __init__(
        self,
        service_name: str,
        compose_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._compose_id_getter = compose_id_getter or _no_compose_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "compose_id", None):
            record.compose_id = self._compose_id_getter()
        record.service = self._service_name
        return True
