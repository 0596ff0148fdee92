import structlog

from nova_users.core.config import Settings
from nova_users.core.logging import (
    add_logger_name,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    rename_message_field,
)


def test_rename_message_field():
    assert rename_message_field(None, "info", {"event": "Role created", "role_id": 1}) == {
        "message": "Role created",
        "role_id": 1,
    }


def test_add_logger_name_falls_back_to_package():
    assert add_logger_name(object(), "info", {})["logger"] == "nova_users"


def test_correlation_id_is_bound_and_cleared():
    bind_correlation_id("cid_abc")
    assert structlog.contextvars.get_contextvars()["correlation_id"] == "cid_abc"

    clear_context()
    assert "correlation_id" not in structlog.contextvars.get_contextvars()


def test_json_logging_renders_message(capsys):
    configure_logging(Settings(_env_file=None, environment="production", log_format="json"))

    get_logger(__name__).info("Role created", role_id=7)

    output = capsys.readouterr().out
    assert '"message": "Role created"' in output
    assert '"role_id": 7' in output
    structlog.reset_defaults()
