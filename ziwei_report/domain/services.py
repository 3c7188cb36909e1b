from __future__ import annotations

from datetime import date, datetime

import structlog
from pydantic import BaseModel

from ziwei_report.domain.archetype_scorer import ArchetypeProfile, analyze_wealth_profile
from ziwei_report.domain.cycle_resolver import (
    DEFAULT_LAST_YEARS_THRESHOLD,
    CycleResult,
    calculate_age,
    is_in_last_years,
    resolve_current_cycle,
)
from ziwei_report.domain.entities import Chart
from ziwei_report.domain.errors import InvalidCreationDateError, UnrecognizedPalaceError
from ziwei_report.domain.guidance import CycleGuidance, MonthlyActionPlan, guidance_for, monthly_plan_for
from ziwei_report.domain.monthly_mapper import MonthlyPlan, build_three_month_plan
from ziwei_report.domain.results import Invalid, Lookup, NotFound, Ok
from ziwei_report.domain.role_groups import RoleGroupProfile, analyze_role_groups
from ziwei_report.domain.talent_strategy import (
    CareerQuadrant,
    RadarDatum,
    build_career_quadrant,
    build_radar_data,
)

log = structlog.get_logger(__name__)


class CycleReport(BaseModel):
    age: int
    cycle: CycleResult
    in_last_years: bool
    guidance: CycleGuidance


class TalentReport(BaseModel):
    profile: RoleGroupProfile
    radar: list[RadarDatum]
    quadrant: CareerQuadrant


class MonthlyReport(BaseModel):
    plan: MonthlyPlan
    action_plans: list[MonthlyActionPlan | None]


def _invalid(exc: UnrecognizedPalaceError | InvalidCreationDateError) -> Invalid:
    details = {"name": exc.name} if isinstance(exc, UnrecognizedPalaceError) else None
    log.warning("report_input_invalid", code=exc.code, reason=str(exc))
    return Invalid(code=exc.code, reason=str(exc), details=details)


class ReportService:
    """Service métier assemblant les sections du rapport Zi Wei Dou Shu.

    Responsabilités:
    - Orchestrer le moteur de cycles et de scores (fonctions pures du domaine).
    - Joindre les contenus d'accompagnement via `content_repo`.
    - Ramener chaque résultat à `Ok` / `NotFound` / `Invalid`.
    """

    def __init__(
        self,
        content_repo,
        default_client_name: str = "Client",
        last_years_threshold: int = DEFAULT_LAST_YEARS_THRESHOLD,
    ):
        """Initialise le service avec ses dépendances.

        Paramètres:
        - content_repo: dépôt des conseils de cycle et des plans mensuels.
        - default_client_name: nom affiché quand le thème n'en porte pas.
        - last_years_threshold: nombre d'années signalant la fin d'un cycle.
        """
        self.content = content_repo
        self.default_client_name = default_client_name
        self.last_years_threshold = last_years_threshold

    def cycle_report(self, chart: Chart, current_year: int) -> Lookup[CycleReport]:
        """Cycle Dayun de l'année `current_year` et conseils du palais gouvernant."""
        age = calculate_age(chart.birth_year, current_year)
        try:
            cycle = resolve_current_cycle(chart, age, current_year)
        except UnrecognizedPalaceError as exc:
            return _invalid(exc)
        if isinstance(cycle, NotFound):
            return cycle
        return Ok(
            CycleReport(
                age=age,
                cycle=cycle,
                in_last_years=is_in_last_years(chart, age, self.last_years_threshold),
                guidance=guidance_for(self.content, cycle.category),
            )
        )

    def wealth_profile(self, chart: Chart, client_name: str | None = None) -> Lookup[ArchetypeProfile]:
        """Profil de richesse ; un thème sans étoile reconnue donne un profil « Unknown »."""
        name = client_name or chart.input.name or self.default_client_name
        return Ok(analyze_wealth_profile(chart, client_name=name))

    def talent_profile(self, chart: Chart) -> Lookup[TalentReport]:
        """Groupes de rôles, radar de recrutement et quadrant ; NotFound sans étoile reconnue."""
        profile = analyze_role_groups(chart)
        if not profile.recognized_any:
            return NotFound(reason="Career and Spouse palaces hold no recognized stars.")
        return Ok(
            TalentReport(
                profile=profile,
                radar=build_radar_data(profile),
                quadrant=build_career_quadrant(profile),
            )
        )

    def monthly_plan(self, chart: Chart, creation_date: date | datetime | str | None) -> Lookup[MonthlyReport]:
        """Plan des trois prochains mois et plans d'action associés."""
        try:
            plan = build_three_month_plan(chart, creation_date)
        except (UnrecognizedPalaceError, InvalidCreationDateError) as exc:
            return _invalid(exc)
        if all(entry.archetype is None for entry in plan.months):
            return NotFound(reason=plan.months[0].reason or "No month could be mapped.")
        action_plans = [
            monthly_plan_for(self.content, entry.archetype) if entry.archetype is not None else None
            for entry in plan.months
        ]
        return Ok(MonthlyReport(plan=plan, action_plans=action_plans))
