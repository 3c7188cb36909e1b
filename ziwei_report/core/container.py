"""
Conteneur d'injection de dépendances.

Instancie les composants centraux (settings, dépôt de contenus, service de rapports) à partir de
la configuration. Le logging est configuré par le point d'entrée (`ziwei_report.app.main`).
"""

from ziwei_report.core.settings import Settings, get_settings
from ziwei_report.domain.services import ReportService
from ziwei_report.infra.content_repo import JSONContentRepository


class Container:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.content_repo = JSONContentRepository(path=self.settings.CONTENT_PATH)
        self.report_service = ReportService(
            self.content_repo,
            default_client_name=self.settings.DEFAULT_CLIENT_NAME,
            last_years_threshold=self.settings.LAST_YEARS_THRESHOLD,
        )
