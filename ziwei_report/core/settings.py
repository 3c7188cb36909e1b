"""Définition et chargement des paramètres de configuration du moteur de rapports.

Objectif du module
------------------
- Centraliser les paramètres (env/.env) via Pydantic Settings
- Résoudre le fichier `.env` à utiliser selon la stratégie: ENV_FILE > .env.{APP_ENV} > .env
"""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Détermination du fichier .env à utiliser avec priorité:
# 1) ENV_FILE (chemin explicite)
# 2) .env.{APP_ENV} si présent
# 3) .env (défaut)
_cwd = Path.cwd()
_env_file_from_env = os.getenv("ENV_FILE")
if _env_file_from_env:
    _ENV_FILE_PATH = _env_file_from_env
else:
    _app_env = os.getenv("APP_ENV", "dev")
    _candidate_specific = _cwd / f".env.{_app_env}"
    _candidate_default = _cwd / ".env"
    if _candidate_specific.exists():
        _ENV_FILE_PATH = _candidate_specific
    else:
        _ENV_FILE_PATH = _candidate_default

DEFAULT_CONTENT_PATH = str(Path(__file__).resolve().parent.parent / "infra" / "content.json")


class Settings(BaseSettings):
    """Modèle de configuration chargé depuis l'environnement et .env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_PATH,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
    )
    APP_NAME: str = "ziwei-report-engine"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Contenus éditoriaux (guidance Dayun, plans mensuels)
    CONTENT_PATH: str = DEFAULT_CONTENT_PATH
    DEFAULT_CLIENT_NAME: str = "Client"
    # Nombre d'années considérées comme « fin de cycle »
    LAST_YEARS_THRESHOLD: int = 3


def get_settings() -> Settings:
    """Construit et retourne la configuration de l'application."""
    return Settings()
