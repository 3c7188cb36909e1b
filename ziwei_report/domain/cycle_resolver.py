"""Résolution du grand cycle de 10 ans (Dayun) en cours.

Objectif du module
------------------
- Trouver le palais dont l'intervalle MajorLimit contient l'âge du sujet.
- Trouver les cycles voisins (précédent / suivant) et la phase dans le cycle.
- Convertir les âges en années civiles par simple arithmétique (année de naissance + âge).

L'absence de cycle (thème mal formé, sujet hors des intervalles) n'est pas une erreur :
`resolve_current_cycle` renvoie `NotFound`.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

import structlog
from pydantic import BaseModel

from ziwei_report.domain.entities import Chart, Palace
from ziwei_report.domain.results import NotFound
from ziwei_report.domain.season import SeasonCategory, classify, message_for, theme_for
from ziwei_report.domain.vocabulary import PalaceCategory

log = structlog.get_logger(__name__)

DEFAULT_LAST_YEARS_THRESHOLD = 3


class CyclePhase(str, Enum):
    """Phase dans le cycle : années 1–3, 4–6, puis 7–10."""

    BUILDING = "building"
    PEAK = "peak"
    INTEGRATION = "integration"


class CycleSummary(BaseModel):
    """Résumé d'un cycle voisin (années, saison, palais en anglais)."""

    years: str
    season: SeasonCategory
    palace: str


class CycleResult(BaseModel):
    """Cycle Dayun courant, prêt pour la couche de rendu."""

    start_year: int
    end_year: int
    current_year: int
    palace_number: int
    palace: str
    palace_chinese: str
    category: PalaceCategory
    season: SeasonCategory
    season_title: str
    core_message: str
    phase: CyclePhase
    year_in_cycle: int
    years_remaining: int
    previous_cycle: CycleSummary | None = None
    next_cycle: CycleSummary | None = None


class AdjacentCycles(NamedTuple):
    previous: Palace | None
    next: Palace | None


def calculate_age(birth_year: int, current_year: int) -> int:
    """Âge entier (année courante − année de naissance)."""
    return current_year - birth_year


def find_cycle_palace(chart: Chart, age: int) -> Palace | None:
    """Palais dont l'intervalle MajorLimit contient `age` (bornes incluses)."""
    for palace in chart.palaces:
        if palace.major_limit is not None and palace.major_limit.contains(age):
            return palace
    return None


def find_adjacent(chart: Chart, current: Palace) -> AdjacentCycles:
    """Cycles immédiatement avant et après `current`.

    - précédent : plus grand `end_age` strictement inférieur au `start_age` courant ;
    - suivant : plus petit `start_age` strictement supérieur au `end_age` courant.
    """
    if current.major_limit is None:
        return AdjacentCycles(None, None)
    start, end = current.major_limit.start_age, current.major_limit.end_age
    limited = [p for p in chart.palaces if p.major_limit is not None]
    before = [p for p in limited if p.major_limit.end_age < start]
    after = [p for p in limited if p.major_limit.start_age > end]
    previous = max(before, key=lambda p: p.major_limit.end_age, default=None)
    following = min(after, key=lambda p: p.major_limit.start_age, default=None)
    return AdjacentCycles(previous, following)


def determine_phase(age: int, start_age: int) -> CyclePhase:
    year_in_cycle = age - start_age + 1
    if 1 <= year_in_cycle <= 3:
        return CyclePhase.BUILDING
    if 4 <= year_in_cycle <= 6:
        return CyclePhase.PEAK
    return CyclePhase.INTEGRATION


def _summarize(chart: Chart, palace: Palace | None) -> CycleSummary | None:
    if palace is None or palace.major_limit is None:
        return None
    birth_year = chart.birth_year
    return CycleSummary(
        years=f"{birth_year + palace.major_limit.start_age}-{birth_year + palace.major_limit.end_age}",
        season=classify(palace.name),
        palace=palace.category.english_name,
    )


def resolve_current_cycle(
    chart: Chart, age: int, current_year: int | None = None
) -> CycleResult | NotFound:
    """Résout le cycle Dayun couvrant `age`.

    Paramètres:
    - chart: thème validé.
    - age: âge entier du sujet.
    - current_year: année affichée ; par défaut année de naissance + âge.

    Retour: `CycleResult`, ou `NotFound` si aucun palais ne couvre l'âge.
    Lève `UnrecognizedPalaceError` si le palais trouvé porte un nom hors vocabulaire.
    """
    palace = find_cycle_palace(chart, age)
    if palace is None or palace.major_limit is None:
        log.info("cycle_not_found", age=age, birth_year=chart.birth_year)
        return NotFound(reason=f"No palace major limit covers age {age}.")

    limit = palace.major_limit
    birth_year = chart.birth_year
    season = classify(palace.name)
    adjacent = find_adjacent(chart, palace)
    result = CycleResult(
        start_year=birth_year + limit.start_age,
        end_year=birth_year + limit.end_age,
        current_year=current_year if current_year is not None else birth_year + age,
        palace_number=palace.number,
        palace=palace.category.english_name,
        palace_chinese=palace.name,
        category=palace.category,
        season=season,
        season_title=theme_for(season),
        core_message=message_for(season),
        phase=determine_phase(age, limit.start_age),
        year_in_cycle=age - limit.start_age + 1,
        years_remaining=limit.end_age - age,
        previous_cycle=_summarize(chart, adjacent.previous),
        next_cycle=_summarize(chart, adjacent.next),
    )
    log.debug("cycle_resolved", palace=result.palace, season=season.value, phase=result.phase.value)
    return result


def is_in_last_years(chart: Chart, age: int, threshold: int = DEFAULT_LAST_YEARS_THRESHOLD) -> bool:
    """Vrai si le sujet est dans les `threshold` dernières années de son cycle."""
    palace = find_cycle_palace(chart, age)
    if palace is None or palace.major_limit is None:
        return False
    return palace.major_limit.end_age - age < threshold


def year_in_cycle(chart: Chart, age: int) -> int | None:
    """Rang de l'année dans le cycle (1–10), ou None sans cycle."""
    palace = find_cycle_palace(chart, age)
    if palace is None or palace.major_limit is None:
        return None
    return age - palace.major_limit.start_age + 1
