"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_fallback, ComposeIdFilter e o
formatter JSON (campos obrigatórios, compose_id do contexto, bytes).
"""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from app.observability import get_compose_id, reset_compose_id, set_compose_id
from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    ComposeIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "evento", name: str = "tests.logging") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def restore_root() -> Iterator[None]:
    """Restaura handlers e nível do root logger após o teste."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("restore_root")
class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_sets_root_level(self, level: str, expected: int) -> None:
        """Nível (case insensitive) é aplicado ao root logger."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_existing_handlers(self) -> None:
        """Configurar duas vezes mantém um único handler."""
        logging.getLogger().handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        handler = configure_logging()
        assert logging.getLogger().handlers == [handler]

    def test_handler_carries_compose_id_filter(self) -> None:
        """Handler instalado tem o ComposeIdFilter."""
        handler = configure_logging(compose_id_getter=get_compose_id)
        assert any(isinstance(f, ComposeIdFilter) for f in handler.filters)

    def test_constants(self) -> None:
        """Níveis válidos e nome padrão do serviço."""
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "compose-relay"

    def test_end_to_end_json_line(self) -> None:
        """Log emitido durante um compose sai como JSON com compose_id."""
        stream = io.StringIO()
        configure_logging(
            level="DEBUG",
            service_name="compose-relay-test",
            compose_id_getter=get_compose_id,
            stream=stream,
        )
        token = set_compose_id("cmp-42")
        try:
            get_logger("app.coordinators.whatsapp.relay.album").info(
                "album_child_relayed", extra={"position": 1}
            )
        finally:
            reset_compose_id(token)

        payload = json.loads(stream.getvalue().strip())
        assert payload["message"] == "album_child_relayed"
        assert payload["compose_id"] == "cmp-42"
        assert payload["service"] == "compose-relay-test"
        assert payload["logger"] == "app.coordinators.whatsapp.relay.album"
        assert payload["level"] == "INFO"
        assert payload["position"] == 1


class TestGetLogger:
    """Testes para get_logger."""

    def test_returns_named_singleton(self) -> None:
        """Mesmo nome retorna a mesma instância."""
        logger = get_logger("app.use_cases")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "app.use_cases"
        assert get_logger("app.use_cases") is logger


class TestLogFallback:
    """Testes para log_fallback."""

    def test_basic_fallback_is_warning(self) -> None:
        """Fallback é registrado como warning com template lazy."""
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "product_thumbnail")

        args, kwargs = logger.warning.call_args
        assert args == ("Fallback applied for %s", "product_thumbnail")
        assert kwargs["extra"] == {"fallback_used": True, "component": "product_thumbnail"}

    def test_optional_fields(self) -> None:
        """reason e elapsed_ms entram apenas quando informados."""
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "product_thumbnail", reason="upload_failed", elapsed_ms=12.5)

        extra = logger.warning.call_args[1]["extra"]
        assert extra["reason"] == "upload_failed"
        assert extra["elapsed_ms"] == 12.5
        assert "error_type" not in extra

    def test_error_type_carried_in_single_record(self) -> None:
        """Tipo do erro vai no mesmo registro do fallback."""
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "product_thumbnail", error_type="UploadDown")

        assert logger.warning.call_count == 1
        assert logger.warning.call_args[1]["extra"]["error_type"] == "UploadDown"


class TestComposeIdFilter:
    """Testes para ComposeIdFilter."""

    def test_injects_compose_id_and_service(self) -> None:
        """compose_id vem do getter; service do construtor."""
        record = _record()
        assert ComposeIdFilter("svc", lambda: "cmp-1").filter(record) is True
        assert record.compose_id == "cmp-1"
        assert record.service == "svc"

    def test_explicit_compose_id_wins(self) -> None:
        """compose_id passado via extra é preservado."""
        record = _record()
        record.compose_id = "explicit"
        ComposeIdFilter("svc", lambda: "from-context").filter(record)
        assert record.compose_id == "explicit"

    def test_without_getter_uses_empty_string(self) -> None:
        """Sem getter, compose_id fica vazio."""
        record = _record()
        ComposeIdFilter("svc").filter(record)
        assert record.compose_id == ""


class TestJsonFormatter:
    """Testes para create_json_formatter."""

    def test_required_fields(self) -> None:
        """Campos obrigatórios e renomeações."""
        assert REQUIRED_LOG_FIELDS[0] == "asctime"
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "compose_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_bytes_are_never_serialized(self) -> None:
        """Bytes em extra viram apenas o tamanho."""
        record = _record("secret_generated")
        record.compose_id = "cmp"
        record.service = "svc"
        record.secret = b"\x00" * 32

        payload = json.loads(create_json_formatter().format(record))

        assert payload["secret"] == "<32 bytes>"
