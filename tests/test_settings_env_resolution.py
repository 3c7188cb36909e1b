"""
Tests pour la résolution des variables d'environnement.

Ce module teste le chargement et la résolution des variables d'environnement à partir de fichiers
.env personnalisés dans les settings.
"""

from __future__ import annotations

import importlib
from pathlib import Path

# Constantes pour éviter les erreurs PLR2004 (Magic values)
TEST_LAST_YEARS_THRESHOLD = 5


def test_settings_reads_env_file(tmp_path: Path, monkeypatch) -> None:
    """
    Teste que les settings lisent correctement les fichiers d'environnement.

    Vérifie que les variables définies dans un fichier .env personnalisé (désigné par ENV_FILE)
    sont correctement chargées et appliquées aux settings.
    """
    env = tmp_path / ".env.custom"
    env.write_text(
        "LAST_YEARS_THRESHOLD=5\nDEFAULT_CLIENT_NAME=Guest\n", encoding="utf-8"
    )
    monkeypatch.setenv("ENV_FILE", str(env))

    # Reload settings module to pick up new ENV_FILE
    settings_mod = importlib.import_module("ziwei_report.core.settings")
    importlib.reload(settings_mod)

    s = settings_mod.get_settings()
    assert s.LAST_YEARS_THRESHOLD == TEST_LAST_YEARS_THRESHOLD
    assert s.DEFAULT_CLIENT_NAME == "Guest"

    monkeypatch.delenv("ENV_FILE")
    importlib.reload(settings_mod)


def test_settings_prefers_app_env_file(tmp_path: Path, monkeypatch) -> None:
    """Teste la priorité de `.env.{APP_ENV}` sur `.env` dans le répertoire courant."""
    (tmp_path / ".env").write_text("DEFAULT_CLIENT_NAME=FromDefault\n", encoding="utf-8")
    (tmp_path / ".env.staging").write_text("DEFAULT_CLIENT_NAME=FromStaging\n", encoding="utf-8")
    monkeypatch.delenv("ENV_FILE", raising=False)
    monkeypatch.delenv("DEFAULT_CLIENT_NAME", raising=False)
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.chdir(tmp_path)

    settings_mod = importlib.import_module("ziwei_report.core.settings")
    importlib.reload(settings_mod)

    assert settings_mod.get_settings().DEFAULT_CLIENT_NAME == "FromStaging"

    monkeypatch.undo()
    importlib.reload(settings_mod)


def test_settings_defaults(monkeypatch) -> None:
    """Teste les valeurs par défaut, dont le chemin du contenu livré."""
    for key in ["ENV_FILE", "CONTENT_PATH", "LAST_YEARS_THRESHOLD", "DEFAULT_CLIENT_NAME"]:
        monkeypatch.delenv(key, raising=False)
    settings_mod = importlib.import_module("ziwei_report.core.settings")
    importlib.reload(settings_mod)
    s = settings_mod.Settings(_env_file=None)
    assert s.CONTENT_PATH.endswith("content.json")
    assert s.LAST_YEARS_THRESHOLD == 3
    assert s.DEFAULT_CLIENT_NAME == "Client"
