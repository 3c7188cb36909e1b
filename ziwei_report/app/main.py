"""
Point d'entrée du moteur de rapports.

Responsabilités du module:
- Initialiser le logging structuré au niveau configuré
- Construire le conteneur (settings, dépôt de contenus, service de rapports)
"""

from __future__ import annotations

from ziwei_report.core.container import Container
from ziwei_report.core.logging import setup_logging
from ziwei_report.core.settings import Settings, get_settings


def create_container(settings: Settings | None = None) -> Container:
    """
    Construit et retourne le conteneur prêt à l'usage.

    Étapes:
    - Lit les paramètres d'exécution
    - Configure le logging structuré (structlog) une seule fois, ici
    - Instancie le conteneur avec ces paramètres
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)
    return Container(settings)
