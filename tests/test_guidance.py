"""
Tests pour les contenus d'accompagnement.

Ce module teste la validation des conseils de cycle et des plans d'action mensuels, ainsi que le
repli sur les conseils génériques.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from ziwei_report.domain.archetype_catalog import ArchetypeKey
from ziwei_report.domain.guidance import (
    ActionTask,
    default_guidance,
    guidance_for,
    monthly_plan_for,
    parse_guidance,
)
from ziwei_report.domain.vocabulary import PalaceCategory
from ziwei_report.infra.content_repo import JSONContentRepository

# Constantes pour éviter les erreurs PLR2004 (Magic values)
TASKS_PER_PLAN = 10

TASK = {
    "taskNum": 1,
    "title": "90-Day Strategic Roadmap",
    "hook": "Focus isn't limitation.",
    "startDay": 0,
    "duration": 3,
    "impact": "high",
    "actions": ["Define ONE clear quarterly objective"],
    "avoidPoints": ["The 'Too Many Goals' trap"],
}


def test_default_guidance_names_palace_and_season() -> None:
    """Teste les conseils génériques d'un palais sans contenu."""
    guidance = default_guidance(PalaceCategory.HEALTH)
    assert guidance.is_default
    assert guidance.key_actions[0] == "Focus on the themes of Health Palace during this winter season"
    assert guidance.reflection_questions[0] == "What does success look like in my Health Palace right now?"
    assert len(guidance.watch_out) == 4
    assert len(guidance.success_metrics) == 3


def test_guidance_from_packaged_content(content_repo) -> None:
    """Teste la lecture des conseils livrés pour le palais de Carrière."""
    guidance = guidance_for(content_repo, PalaceCategory.CAREER)
    assert not guidance.is_default
    assert guidance.key_actions[0].startswith("Step into bigger roles")


def test_packaged_guidance_covers_every_palace(content_repo) -> None:
    """Teste que chacun des 12 palais a des conseils dédiés dans le contenu livré."""
    for category in PalaceCategory:
        guidance = guidance_for(content_repo, category)
        assert not guidance.is_default, category
        assert guidance.key_actions


def test_guidance_falls_back_to_default(tmp_path: Path) -> None:
    """Teste le repli générique quand le dépôt n'a rien pour le palais."""
    repo = JSONContentRepository(str(tmp_path / "absent.json"))
    assert guidance_for(repo, PalaceCategory.PARENTS).is_default


def test_invalid_guidance_is_treated_as_absent(tmp_path: Path) -> None:
    """Teste qu'un contenu invalide (liste vide) est ignoré au profit du générique."""
    path = tmp_path / "content.json"
    payload = {
        "guidance": {
            "wealth": {
                "keyActions": [],
                "watchOut": ["x"],
                "successMetrics": ["y"],
                "reflectionQuestions": ["z"],
            }
        }
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    repo = JSONContentRepository(str(path))
    assert parse_guidance(repo.get_palace_guidance(PalaceCategory.WEALTH), PalaceCategory.WEALTH) is None
    assert guidance_for(repo, PalaceCategory.WEALTH).is_default


def test_action_task_validation() -> None:
    """Teste les règles de validation d'une tâche mensuelle."""
    task = ActionTask.model_validate(TASK)
    assert task.start_day == 0
    assert task.avoid_points == ["The 'Too Many Goals' trap"]
    for field, value in [
        ("impact", "low"),
        ("duration", 0),
        ("startDay", -1),
        ("startDay", 30),
        ("title", "   "),
        ("hook", ""),
        ("actions", []),
        ("avoidPoints", []),
    ]:
        with pytest.raises(ValidationError):
            ActionTask.model_validate({**TASK, field: value})


def test_monthly_plan_from_packaged_content(content_repo) -> None:
    """Teste les plans mensuels livrés : 10 tâches numérotées pour chacun des 4 archétypes."""
    for key in ArchetypeKey:
        plan = monthly_plan_for(content_repo, key)
        assert plan is not None
        assert plan.key is key
        assert [t.task_num for t in plan.tasks] == list(range(1, TASKS_PER_PLAN + 1))


def test_invalid_monthly_plan_is_absent(tmp_path: Path) -> None:
    """Teste qu'un plan sans tâche est traité comme absent."""
    path = tmp_path / "content.json"
    payload = {"monthlyPlans": {"collaborator": {"label": "Collaborator", "monthTheme": "x", "tasks": []}}}
    path.write_text(json.dumps(payload), encoding="utf-8")
    repo = JSONContentRepository(str(path))
    assert monthly_plan_for(repo, ArchetypeKey.COLLABORATOR) is None
    assert monthly_plan_for(repo, ArchetypeKey.INVESTMENT_BRAIN) is None
