"""Configuration de test pour pytest avec gestion des chemins.

Ce module configure pytest pour résoudre les imports `ziwei_report` en ajoutant la racine du projet
au sys.path pour les tests.
"""

import os
import sys

import pytest

# Ensure project root is on sys.path so that
# imports like `from ziwei_report...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def content_repo():
    """Dépôt de contenus adossé au fichier JSON livré avec le paquet."""
    from ziwei_report.core.settings import DEFAULT_CONTENT_PATH
    from ziwei_report.infra.content_repo import JSONContentRepository

    return JSONContentRepository(DEFAULT_CONTENT_PATH)
