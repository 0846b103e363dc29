import logging

from reltab.core import ColumnKind, ColumnType
from reltab.utils.logging import CorrelationIdFilter, get_correlation_id, get_logger, set_correlation_id


def test_correlation_id_round_trip():
    token = set_correlation_id("test-token")
    assert token == "test-token"
    assert get_correlation_id() == "test-token"


def test_loggers_are_namespaced_under_package():
    logger = get_logger("tests.logging")
    assert logger.name == "reltab.tests.logging"
    handlers = logging.getLogger("reltab").handlers
    assert handlers
    assert any(isinstance(f, CorrelationIdFilter) for f in handlers[0].filters)


def test_render_failure_is_logged_with_native_type(caplog):
    caplog.set_level(logging.DEBUG, logger="reltab")
    ColumnType("TIMESTAMP", ColumnKind.TIMESTAMP).render(object())
    records = [r for r in caplog.records if r.name == "reltab.core.rendering"]
    assert records
    assert records[0].levelno == logging.WARNING
    assert records[0].kind == "timestamp"


def test_utils_exports_only_logging_setup():
    import reltab.utils

    assert reltab.utils.__all__ == ["configure_logging", "get_logger"]
