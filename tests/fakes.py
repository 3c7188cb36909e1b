"""
Fabriques de thèmes pour les tests unitaires.

Ce module construit des thèmes Zi Wei Dou Shu déterministes au format du générateur amont
(clés camelCase) :
- palais en position i (1–12) numérotés i, nommés dans l'ordre fixe 命宫 → 父母 ;
- grands cycles contigus de 10 ans, le premier commençant à `first_start_age` ;
- flux annuels consécutifs, le palais 1 portant `flow_base_year`.
"""

from __future__ import annotations

from typing import Any

from ziwei_report.domain.entities import Chart
from ziwei_report.domain.vocabulary import PALACE_ORDER

BIRTH_YEAR = 1990
FIRST_START_AGE = 2
FLOW_BASE_YEAR = 2020


def make_palace_dicts(
    stars: dict[str, list[str]] | None = None,
    names: list[str] | None = None,
    first_start_age: int = FIRST_START_AGE,
    flow_base_year: int | None = FLOW_BASE_YEAR,
) -> list[dict[str, Any]]:
    """Construit les 12 palais bruts ; `stars` associe un nom de palais à ses étoiles principales."""
    stars = stars or {}
    names = names or [category.chinese_name for category in PALACE_ORDER]
    palaces = []
    for idx, name in enumerate(names):
        start = first_start_age + 10 * idx
        palace: dict[str, Any] = {
            "number": idx + 1,
            "name": name,
            "majorLimit": {"startAge": start, "endAge": start + 9},
            "mainStar": [{"name": s} for s in stars.get(name, [])],
            "minorStars": [],
            "auxiliaryStars": [],
        }
        if flow_base_year is not None:
            palace["annualFlow"] = {"year": flow_base_year + idx}
        palaces.append(palace)
    return palaces


def make_chart(
    stars: dict[str, list[str]] | None = None,
    names: list[str] | None = None,
    birth_year: int = BIRTH_YEAR,
    first_start_age: int = FIRST_START_AGE,
    flow_base_year: int | None = FLOW_BASE_YEAR,
    client_name: str | None = None,
) -> Chart:
    """Thème validé prêt pour le moteur."""
    return Chart.model_validate(
        {
            "input": {"year": birth_year, "month": 6, "day": 15, "hour": 10, "name": client_name},
            "palaces": make_palace_dicts(stars, names, first_start_age, flow_base_year),
        }
    )
