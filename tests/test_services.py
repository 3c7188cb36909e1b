"""
Tests pour le service métier de rapports.

Ce module teste le service ReportService qui assemble les sections du rapport et ramène chaque
résultat à Ok / NotFound / Invalid.
"""

from __future__ import annotations

from unittest.mock import Mock

from tests.fakes import make_chart, make_palace_dicts
from ziwei_report.domain.archetype_catalog import ArchetypeKey
from ziwei_report.domain.archetype_scorer import UNKNOWN_ARCHETYPE
from ziwei_report.domain.results import Invalid, NotFound, Ok
from ziwei_report.domain.services import ReportService
from ziwei_report.domain.vocabulary import PalaceCategory

# Constantes pour éviter les erreurs PLR2004 (Magic values)
YEAR_2035 = 2035
AGE_45 = 45
MONTHS_IN_PLAN = 3

STARS = {"财帛": ["紫微"], "疾厄": ["天机"], "迁移": ["武曲"], "官禄": ["天同", "太阳"]}


def test_report_service_init() -> None:
    """Teste l'initialisation du service."""
    content_repo = Mock()
    service = ReportService(content_repo, default_client_name="Guest", last_years_threshold=2)
    assert service.content == content_repo
    assert service.default_client_name == "Guest"
    assert service.last_years_threshold == 2


def test_cycle_report_with_guidance(content_repo) -> None:
    """Teste le rapport de cycle : 45 ans en 2035, palais 财帛, conseils dédiés."""
    service = ReportService(content_repo)
    result = service.cycle_report(make_chart(), YEAR_2035)
    assert isinstance(result, Ok)
    report = result.value
    assert report.age == AGE_45
    assert report.cycle.category is PalaceCategory.WEALTH
    assert report.cycle.current_year == YEAR_2035
    assert not report.in_last_years
    assert not report.guidance.is_default


def test_cycle_report_not_found(content_repo) -> None:
    """Teste l'absence de cycle pour un âge hors intervalles."""
    result = ReportService(content_repo).cycle_report(make_chart(), 1991)
    assert isinstance(result, NotFound)
    assert result.status == "not_found"


def test_cycle_report_unrecognized_palace(content_repo) -> None:
    """Teste la conversion d'une erreur de vocabulaire en Invalid."""
    names = [p["name"] for p in make_palace_dicts()]
    names[4] = "未知"
    result = ReportService(content_repo).cycle_report(make_chart(names=names), YEAR_2035)
    assert isinstance(result, Invalid)
    assert result.code == "UNRECOGNIZED_PALACE"
    assert result.details == {"name": "未知"}


def test_wealth_profile_client_name(content_repo) -> None:
    """Teste le nom affiché : argument, puis thème, puis valeur par défaut."""
    service = ReportService(content_repo)
    chart = make_chart(stars=STARS)
    assert service.wealth_profile(chart).value.client_name == "Client"
    assert service.wealth_profile(chart, client_name="Mei").value.client_name == "Mei"
    named = make_chart(stars=STARS, client_name="Lin")
    assert service.wealth_profile(named).value.client_name == "Lin"
    assert service.wealth_profile(make_chart()).value.dominant_archetype == UNKNOWN_ARCHETYPE


def test_talent_profile(content_repo) -> None:
    """Teste le profil de talents et son absence sans étoile reconnue."""
    service = ReportService(content_repo)
    result = service.talent_profile(make_chart(stars=STARS))
    assert isinstance(result, Ok)
    assert result.value.profile.source_palace is PalaceCategory.CAREER
    assert len(result.value.radar) == 8
    assert isinstance(service.talent_profile(make_chart()), NotFound)


def test_monthly_plan(content_repo) -> None:
    """Teste le plan mensuel et les plans d'action joints."""
    result = ReportService(content_repo).monthly_plan(make_chart(stars=STARS), "2025-12-10")
    assert isinstance(result, Ok)
    plan = result.value.plan
    assert len(plan.months) == MONTHS_IN_PLAN
    assert plan.months[0].archetype is ArchetypeKey.STRATEGY_PLANNER
    assert [p.key for p in result.value.action_plans] == [e.archetype for e in plan.months]


def test_monthly_plan_invalid_date(content_repo) -> None:
    """Teste la conversion d'une date de création illisible en Invalid."""
    result = ReportService(content_repo).monthly_plan(make_chart(stars=STARS), "bad")
    assert isinstance(result, Invalid)
    assert result.code == "INVALID_CREATION_DATE"
    assert result.reason == "Report creation date is missing or invalid."


def test_monthly_plan_not_found(content_repo) -> None:
    """Teste NotFound quand aucun mois ne peut être résolu."""
    chart = make_chart(stars=STARS, flow_base_year=None)
    result = ReportService(content_repo).monthly_plan(chart, "2025-12-10")
    assert isinstance(result, NotFound)
    assert result.reason == "Unable to locate annual flow palace for report year."
