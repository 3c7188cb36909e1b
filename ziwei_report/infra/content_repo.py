"""Dépôt de contenus basé sur fichiers JSON.

Ce module implémente un dépôt de contenus simple utilisant un fichier JSON pour stocker les
conseils de cycle (par catégorie de palais) et les plans d'action mensuels (par archétype).
"""

import json
import os
from enum import Enum
from types import MappingProxyType
from typing import Any

import structlog

log = structlog.get_logger(__name__)

GUIDANCE_SECTION = "guidance"
MONTHLY_PLANS_SECTION = "monthlyPlans"


def _key(value: str | Enum) -> str:
    return value.value if isinstance(value, Enum) else value


class JSONContentRepository:
    """Dépôt de contenus basé sur un fichier JSON.

    Le fichier est lu une seule fois, au premier accès, puis gardé en lecture seule. Les sections
    absentes sont traitées comme vides ; la validation du contenu relève du domaine.
    """

    def __init__(self, path: str):
        """Initialise le dépôt.

        Paramètres:
        - path: chemin du fichier JSON contenant les contenus.
        """
        self.path = path
        self._data: MappingProxyType | None = None

    def _load(self) -> MappingProxyType:
        if self._data is None:
            if not os.path.exists(self.path):
                log.warning("content_file_missing", path=self.path)
                data: dict[str, Any] = {}
            else:
                with open(self.path, encoding="utf-8") as f:
                    data = json.load(f)
                log.debug("content_loaded", path=self.path, sections=sorted(data))
            self._data = MappingProxyType(data)
        return self._data

    def _section(self, name: str) -> dict[str, Any]:
        section = self._load().get(name)
        return section if isinstance(section, dict) else {}

    def get_palace_guidance(self, category: str | Enum) -> dict[str, Any] | None:
        """Retourne les conseils bruts d'une catégorie de palais, ou None si absents."""
        return self._section(GUIDANCE_SECTION).get(_key(category))

    def get_monthly_plan(self, archetype: str | Enum) -> dict[str, Any] | None:
        """Retourne le plan d'action brut d'un archétype, ou None si absent."""
        return self._section(MONTHLY_PLANS_SECTION).get(_key(archetype))
