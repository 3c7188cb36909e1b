"""Rotation mensuelle : mois civils → palais → archétype de richesse du mois.

Objectif du module
------------------
- Repérer le palais du flux annuel de l'année de référence (P0).
- Associer chaque palais à un mois par rotation modulo 12 à partir du 10e palais du thème.
- Rebaptiser le thème autour du palais du mois puis réutiliser l'analyse de richesse.
- Construire le plan des trois prochains mois avec un archétype distinct par mois si possible.

Formule : mois(P) = (départ + ((P − P0) mod 12)) mod 12.
"""

from __future__ import annotations

from datetime import date, datetime

import structlog
from pydantic import BaseModel, Field

from ziwei_report.domain.archetype_catalog import ARCHETYPES, ArchetypeKey
from ziwei_report.domain.archetype_scorer import ArchetypeScore, analyze_wealth_profile
from ziwei_report.domain.entities import PALACE_COUNT, Chart
from ziwei_report.domain.errors import InvalidCreationDateError
from ziwei_report.domain.vocabulary import PALACE_ORDER, palace_category

log = structlog.get_logger(__name__)

STARTING_PALACE_POSITION = 9
MONTHS_IN_PLAN = 3

MONTH_LABELS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

REASON_INVALID_MONTH = "Month index must be between 0 and 11."
REASON_NO_ANNUAL_FLOW = "Unable to locate annual flow palace for report year."
REASON_UNMAPPED_MONTH = "Unable to map month to palace."
REASON_NO_STARS = "Wealth palace has no recognized stars."
REASON_DUPLICATE = "Alternative wealth code not available; showing duplicate."


class CalendarMonth(BaseModel):
    sequence: int
    month_index: int  # 0 = janvier
    year: int
    label: str
    start_date: date


class MonthArchetypeResult(BaseModel):
    """Archétype dominant d'un mois ; `archetype` vaut None avec une raison en cas d'échec."""

    archetype: ArchetypeKey | None = None
    vector: list[ArchetypeScore] = Field(default_factory=list)
    reason: str | None = None


class MonthPlanEntry(BaseModel):
    month: CalendarMonth
    archetype: ArchetypeKey | None = None
    label: str | None = None
    theme: str | None = None
    reason: str | None = None
    duplicate: bool = False


class MonthlyPlan(BaseModel):
    reference_year: int
    months: list[MonthPlanEntry]


def find_annual_flow_palace(chart: Chart, year: int) -> int | None:
    """Numéro du palais dont le flux annuel correspond à `year`."""
    for palace in chart.palaces:
        if palace.annual_flow is not None and palace.annual_flow.year == year:
            return palace.number
    return None


def starting_month_index(chart: Chart) -> int:
    """Index de mois de départ : rang de la catégorie du 10e palais (ordre du thème).

    Raises:
        UnrecognizedPalaceError: si ce palais porte un nom hors vocabulaire.
    """
    return palace_category(chart.palaces[STARTING_PALACE_POSITION].name).ordinal


def month_index_for_palace(start: int, p0: int, palace_number: int) -> int:
    return (start + (palace_number - p0) % PALACE_COUNT) % PALACE_COUNT


def palace_for_month_index(start: int, p0: int, month_index: int) -> int | None:
    """Inverse de `month_index_for_palace` par parcours des numéros 1 à 12."""
    if not 0 <= month_index < PALACE_COUNT:
        return None
    for number in range(1, PALACE_COUNT + 1):
        if month_index_for_palace(start, p0, number) == month_index:
            return number
    return None


def relabel_chart(chart: Chart, palace_number: int) -> Chart:
    """Copie du thème où le palais en position i prend le nom de la catégorie (P − i) mod 12.

    Le palais `palace_number` devient ainsi le palais de la Vie ; les étoiles ne bougent pas.
    """
    palaces = tuple(
        palace.model_copy(update={"name": PALACE_ORDER[(palace_number - position) % PALACE_COUNT].chinese_name})
        for position, palace in enumerate(chart.palaces, start=1)
    )
    return chart.model_copy(update={"palaces": palaces})


def resolve_month_archetypes(chart: Chart, reference_year: int, month_index: int) -> MonthArchetypeResult:
    """Vecteur d'archétypes du mois `month_index` (0–11) pour l'année de référence.

    Raises:
        UnrecognizedPalaceError: si le palais de départ porte un nom hors vocabulaire.
    """
    if not 0 <= month_index < PALACE_COUNT:
        return MonthArchetypeResult(reason=REASON_INVALID_MONTH)

    p0 = find_annual_flow_palace(chart, reference_year)
    if p0 is None:
        log.info("month_unmapped", reason="no_annual_flow", year=reference_year)
        return MonthArchetypeResult(reason=REASON_NO_ANNUAL_FLOW)

    month_palace = palace_for_month_index(starting_month_index(chart), p0, month_index)
    if month_palace is None:
        log.info("month_unmapped", reason="no_palace", month_index=month_index)
        return MonthArchetypeResult(reason=REASON_UNMAPPED_MONTH)

    profile = analyze_wealth_profile(relabel_chart(chart, month_palace))
    if not profile.recognized_any or not profile.vector:
        return MonthArchetypeResult(reason=REASON_NO_STARS)
    return MonthArchetypeResult(archetype=profile.vector[0].key, vector=profile.vector)


def map_month_to_archetype(chart: Chart, reference_year: int, month_index: int) -> ArchetypeKey | None:
    return resolve_month_archetypes(chart, reference_year, month_index).archetype


def parse_creation_date(value: date | datetime | str | None) -> date:
    """Date de création du rapport (date, datetime ou chaîne ISO).

    Raises:
        InvalidCreationDateError: valeur absente ou illisible.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidCreationDateError(value)
    text = value.strip()
    try:
        if "T" in text:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return date.fromisoformat(text)
    except ValueError as exc:
        raise InvalidCreationDateError(value) from exc


def build_next_three_months(creation_date: date | datetime | str | None) -> list[CalendarMonth]:
    """Les trois mois civils suivant le mois de création (passage d'année inclus)."""
    base = parse_creation_date(creation_date)
    months = []
    for sequence in range(1, MONTHS_IN_PLAN + 1):
        offset = base.month - 1 + sequence
        year = base.year + offset // 12
        month_index = offset % 12
        months.append(
            CalendarMonth(
                sequence=sequence,
                month_index=month_index,
                year=year,
                label=f"{MONTH_LABELS[month_index]} {year}",
                start_date=date(year, month_index + 1, 1),
            )
        )
    return months


def build_three_month_plan(chart: Chart, creation_date: date | datetime | str | None) -> MonthlyPlan:
    """Plan des trois prochains mois avec déduplication gloutonne des archétypes.

    Un mois dont l'archétype dominant est déjà pris reçoit son archétype non pris le mieux
    classé ; s'il n'en reste aucun, le doublon est conservé et signalé.

    Raises:
        InvalidCreationDateError: date de création absente ou illisible.
        UnrecognizedPalaceError: palais de départ hors vocabulaire.
    """
    reference_year = parse_creation_date(creation_date).year
    months = build_next_three_months(creation_date)

    used: set[ArchetypeKey] = set()
    entries = []
    for month in months:
        result = resolve_month_archetypes(chart, reference_year, month.month_index)
        archetype, reason, duplicate = result.archetype, result.reason, False
        if archetype is not None and archetype in used:
            alternative = next((s.key for s in result.vector if s.key not in used), None)
            if alternative is not None:
                archetype, reason = alternative, None
            else:
                reason, duplicate = REASON_DUPLICATE, True
        if archetype is not None:
            used.add(archetype)
        entries.append(
            MonthPlanEntry(
                month=month,
                archetype=archetype,
                label=ARCHETYPES[archetype].label if archetype is not None else None,
                theme=ARCHETYPES[archetype].month_theme if archetype is not None else None,
                reason=reason,
                duplicate=duplicate,
            )
        )
    log.debug("monthly_plan_built", year=reference_year, archetypes=[e.archetype for e in entries])
    return MonthlyPlan(reference_year=reference_year, months=entries)
