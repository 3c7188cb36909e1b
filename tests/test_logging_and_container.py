"""Tests pour la configuration structlog et le conteneur de dépendances."""

from __future__ import annotations

import structlog
from structlog.testing import capture_logs

from tests.fakes import make_chart
from ziwei_report.app.main import create_container
from ziwei_report.core.container import Container
from ziwei_report.core.logging import setup_logging
from ziwei_report.core.settings import DEFAULT_CONTENT_PATH, Settings
from ziwei_report.domain.results import Ok

# Constantes pour éviter les erreurs PLR2004 (Magic values)
TEST_THRESHOLD = 4


def test_setup_logging_filters_by_level() -> None:
    """Teste que le niveau minimal filtre les événements inférieurs."""
    setup_logging("WARNING")
    with capture_logs() as logs:
        logger = structlog.get_logger("tests.logging")
        logger.info("hidden_event")
        logger.warning("shown_event", palace="wealth")
    setup_logging("DEBUG")
    assert [entry["event"] for entry in logs] == ["shown_event"]
    assert logs[0]["palace"] == "wealth"
    assert logs[0]["log_level"] == "warning"


def test_setup_logging_accepts_unknown_level_name() -> None:
    """Teste qu'un nom de niveau inconnu retombe sur DEBUG sans erreur."""
    setup_logging("not-a-level")
    setup_logging(20)


def test_container_wires_report_service() -> None:
    """Teste que le conteneur propage la configuration au service."""
    settings = Settings(
        _env_file=None,
        CONTENT_PATH=DEFAULT_CONTENT_PATH,
        DEFAULT_CLIENT_NAME="Guest",
        LAST_YEARS_THRESHOLD=TEST_THRESHOLD,
        LOG_LEVEL="ERROR",
    )
    setup_logging("WARNING")
    wrapper = structlog.get_config()["wrapper_class"]
    container = Container(settings)
    # le conteneur ne reconfigure pas structlog
    assert structlog.get_config()["wrapper_class"] is wrapper
    setup_logging("DEBUG")
    assert container.settings is settings
    assert container.report_service.content is container.content_repo
    assert container.report_service.last_years_threshold == TEST_THRESHOLD
    result = container.report_service.wealth_profile(make_chart())
    assert isinstance(result, Ok)
    assert result.value.client_name == "Guest"


def test_create_container_configures_logging_level() -> None:
    """Teste que le point d'entrée applique LOG_LEVEL puis construit le conteneur."""
    settings = Settings(_env_file=None, CONTENT_PATH=DEFAULT_CONTENT_PATH, LOG_LEVEL="WARNING")
    container = create_container(settings)
    with capture_logs() as logs:
        logger = structlog.get_logger("tests.entrypoint")
        logger.info("hidden_event")
        logger.warning("shown_event")
    setup_logging("DEBUG")
    assert container.settings is settings
    assert [entry["event"] for entry in logs] == ["shown_event"]
