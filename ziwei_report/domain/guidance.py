"""Contenus d'accompagnement : conseils du cycle Dayun et plans d'action mensuels.

Les contenus bruts viennent du dépôt de contenus (JSON). Ils sont validés ici ; un contenu invalide
est journalisé puis traité comme absent, et le cycle retombe alors sur des conseils génériques.
"""

from __future__ import annotations

from typing import Any, Literal

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ziwei_report.domain.archetype_catalog import ArchetypeKey
from ziwei_report.domain.season import classify
from ziwei_report.domain.vocabulary import PalaceCategory

log = structlog.get_logger(__name__)

_CONTENT = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class CycleGuidance(BaseModel):
    """Actions clés, points de vigilance, indicateurs de réussite et questions de réflexion."""

    model_config = _CONTENT

    key_actions: list[str] = Field(alias="keyActions", min_length=1)
    watch_out: list[str] = Field(alias="watchOut", min_length=1)
    success_metrics: list[str] = Field(alias="successMetrics", min_length=1)
    reflection_questions: list[str] = Field(alias="reflectionQuestions", min_length=1)
    is_default: bool = False

    @field_validator("key_actions", "watch_out", "success_metrics", "reflection_questions")
    @classmethod
    def _no_blank_entries(cls, items: list[str]) -> list[str]:
        if any(not item.strip() for item in items):
            raise ValueError("entries must be non-empty strings")
        return items


class ActionTask(BaseModel):
    """Tâche d'un plan mensuel (jour de départ 0–29, durée en jours)."""

    model_config = _CONTENT

    task_num: int = Field(alias="taskNum")
    title: str = Field(min_length=1)
    hook: str = Field(min_length=1)
    start_day: int = Field(alias="startDay", ge=0, le=29)
    duration: int = Field(ge=1)
    impact: Literal["high", "medium", "quick-win"]
    actions: list[str] = Field(min_length=1)
    avoid_points: list[str] = Field(alias="avoidPoints", min_length=1)

    @field_validator("title", "hook")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class MonthlyActionPlan(BaseModel):
    model_config = _CONTENT

    key: ArchetypeKey
    label: str = Field(min_length=1)
    month_theme: str = Field(alias="monthTheme", min_length=1)
    tasks: list[ActionTask] = Field(min_length=1)


def default_guidance(category: PalaceCategory) -> CycleGuidance:
    """Conseils génériques pour un palais sans contenu dédié."""
    palace = category.english_name
    season = classify(category).value
    return CycleGuidance(
        key_actions=[
            f"Focus on the themes of {palace} during this {season} season",
            "Review and assess your current situation in this life area",
            "Make strategic moves aligned with this season's energy",
            "Seek guidance from mentors or experts in this domain",
        ],
        watch_out=[
            "Forcing progress when patience is needed",
            "Ignoring important signals in this life area",
            "Letting fear or doubt prevent necessary action",
            "Overlooking opportunities in this domain",
        ],
        success_metrics=[
            "Clear strategy developed for this life area",
            "Measurable progress made in key objectives",
            "Increased clarity and confidence in this domain",
        ],
        reflection_questions=[
            f"What does success look like in my {palace} right now?",
            "What patterns or habits are holding me back here?",
            "What would change if I took this area more seriously?",
            "Who could I learn from in this domain?",
        ],
        is_default=True,
    )


def parse_guidance(raw: dict[str, Any] | None, category: PalaceCategory) -> CycleGuidance | None:
    if raw is None:
        return None
    try:
        return CycleGuidance.model_validate(raw)
    except ValidationError as exc:
        log.warning("guidance_content_invalid", palace=category.value, errors=exc.error_count())
        return None


def guidance_for(content_repo, category: PalaceCategory) -> CycleGuidance:
    """Conseils du palais depuis le dépôt, sinon conseils génériques."""
    guidance = parse_guidance(content_repo.get_palace_guidance(category), category)
    if guidance is None:
        log.debug("guidance_default_used", palace=category.value)
        return default_guidance(category)
    return guidance


def parse_monthly_plan(raw: dict[str, Any] | None, key: ArchetypeKey) -> MonthlyActionPlan | None:
    if raw is None:
        return None
    try:
        return MonthlyActionPlan.model_validate({**raw, "key": key})
    except ValidationError as exc:
        log.warning("monthly_plan_content_invalid", archetype=key.value, errors=exc.error_count())
        return None


def monthly_plan_for(content_repo, key: ArchetypeKey) -> MonthlyActionPlan | None:
    return parse_monthly_plan(content_repo.get_monthly_plan(key), key)