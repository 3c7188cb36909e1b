"""
Tests pour les entités du thème.

Ce module teste la validation structurelle du thème (12 palais, numéros et noms uniques) et la
lecture des clés camelCase du générateur amont.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tests.fakes import make_chart, make_palace_dicts
from ziwei_report.domain.entities import Chart, MajorLimit, Palace
from ziwei_report.domain.vocabulary import PalaceCategory

# Constantes pour éviter les erreurs PLR2004 (Magic values)
BIRTH_YEAR = 1990
START_AGE = 12
END_AGE = 21


def test_chart_reads_camel_case_keys() -> None:
    """Teste que les alias camelCase sont acceptés à la construction."""
    chart = make_chart(stars={"财帛": ["武曲"]})
    wealth = chart.palaces[4]
    assert chart.birth_year == BIRTH_YEAR
    assert wealth.major_limit is not None
    assert wealth.major_limit.start_age == 42
    assert wealth.core_markers() == ["武曲"]


def test_chart_requires_twelve_palaces() -> None:
    """Teste le rejet d'un thème à 11 palais."""
    palaces = make_palace_dicts()[:11]
    with pytest.raises(ValidationError):
        Chart.model_validate({"input": {"year": BIRTH_YEAR}, "palaces": palaces})


def test_chart_rejects_duplicate_names() -> None:
    """Teste le rejet de deux palais portant le même nom."""
    palaces = make_palace_dicts()
    palaces[1]["name"] = palaces[0]["name"]
    with pytest.raises(ValidationError):
        Chart.model_validate({"input": {"year": BIRTH_YEAR}, "palaces": palaces})


def test_chart_rejects_spelling_variants_of_one_palace() -> None:
    """Teste le rejet de deux graphies du même palais (命宮 et 命宫)."""
    palaces = make_palace_dicts()
    palaces[0]["name"] = "命宮"
    palaces[1]["name"] = "命宫"
    with pytest.raises(ValidationError):
        Chart.model_validate({"input": {"year": BIRTH_YEAR}, "palaces": palaces})


def test_chart_accepts_one_unknown_name_per_palace() -> None:
    """Teste que des noms inconnus distincts restent acceptés à la construction."""
    names = [p["name"] for p in make_palace_dicts()]
    names[0], names[1] = "未知", "其他"
    chart = make_chart(names=names)
    assert [p.name for p in chart.palaces[:2]] == ["未知", "其他"]


def test_chart_rejects_duplicate_numbers() -> None:
    """Teste le rejet de numéros de palais en double."""
    palaces = make_palace_dicts()
    palaces[1]["number"] = 1
    with pytest.raises(ValidationError):
        Chart.model_validate({"input": {"year": BIRTH_YEAR}, "palaces": palaces})


def test_major_limit_bounds() -> None:
    """Teste l'intervalle inclusif et le rejet d'un intervalle inversé."""
    limit = MajorLimit(startAge=START_AGE, endAge=END_AGE)
    assert limit.contains(START_AGE)
    assert limit.contains(END_AGE)
    assert not limit.contains(END_AGE + 1)
    with pytest.raises(ValidationError):
        MajorLimit(start_age=END_AGE, end_age=START_AGE)


def test_find_palace_uses_aliases() -> None:
    """Teste la recherche par catégorie sur une graphie traditionnelle."""
    names = [p["name"] for p in make_palace_dicts()]
    names[4] = "財帛"
    names[0] = "未知"
    chart = make_chart(names=names)
    wealth = chart.find_palace(PalaceCategory.WEALTH)
    assert wealth is not None
    assert wealth.number == 5
    assert chart.find_palace(PalaceCategory.LIFE) is None


def test_all_markers_includes_every_slot() -> None:
    """Teste l'ordre des emplacements renvoyés par `all_markers`."""
    palace = Palace.model_validate(
        {
            "number": 9,
            "name": "官禄",
            "mainStar": [{"name": "紫微"}],
            "bodyStar": {"name": "天相"},
            "minorStars": [{"name": "左辅"}],
            "yearStars": [{"name": "文昌"}],
            "hourStars": [{"name": "文曲"}],
        }
    )
    assert palace.all_markers() == ["紫微", "天相", "左辅", "文昌", "文曲"]
    assert palace.core_markers() == ["紫微", "左辅"]


def test_entities_are_frozen() -> None:
    """Teste l'immuabilité des entités."""
    chart = make_chart()
    with pytest.raises(ValidationError):
        chart.palaces[0].name = "兄弟"
