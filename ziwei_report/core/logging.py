"""Configuration de logging basée sur structlog.

Objectif du module
------------------
- Fournir une configuration de logs structurés lisibles en développement.
- Permettre de relever le niveau minimal (DEBUG par défaut) depuis la configuration.
"""

import logging
import sys

import structlog


def setup_logging(level: str | int = logging.DEBUG) -> None:
    """Configure structlog pour produire des logs détaillés et filtrables.

    Paramètres:
    - level: niveau minimal, nom (`"INFO"`) ou valeur numérique du module `logging`.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.DEBUG
    timestamper = structlog.processors.TimeStamper(fmt="ISO")
    structlog.configure(
        processors=[
            timestamper,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
