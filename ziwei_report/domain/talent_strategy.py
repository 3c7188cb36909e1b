"""Vues « stratégie de talents » dérivées des groupes de rôles : radar et quadrant."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from ziwei_report.domain.archetype_scorer import clamp_score, round_score
from ziwei_report.domain.role_groups import RoleGroupKey, RoleGroupScores

RADAR_AXES: tuple[tuple[str, str], ...] = (
    ("Strategist", "💼"),
    ("Executor", "⚙️"),
    ("Creative", "🎨"),
    ("Analyst", "📊"),
    ("Salesperson", "🧲"),
    ("Operations", "🏗️"),
    ("Finance", "💰"),
    ("People Ops", "🧑‍🤝‍🧑"),
)

GROUP_AXES: dict[RoleGroupKey, tuple[str, str]] = {
    RoleGroupKey.ARCHITECT: ("Strategist", "Operations"),
    RoleGroupKey.GUARDIAN: ("Finance", "Analyst"),
    RoleGroupKey.CATALYST: ("Salesperson", "Creative"),
    RoleGroupKey.ANCHOR: ("People Ops", "Executor"),
}


class RadarDatum(BaseModel):
    role: str
    icon: str
    ideal: float  # 0–10 : priorité de recrutement


class QuadrantLabel(BaseModel):
    title: str
    subtitle: str


class QuadrantLabels(BaseModel):
    top_left: QuadrantLabel = QuadrantLabel(title="Architect", subtitle="Structured drive and systems")
    top_right: QuadrantLabel = QuadrantLabel(title="Catalyst", subtitle="Momentum and decisive action")
    bottom_left: QuadrantLabel = QuadrantLabel(title="Guardian", subtitle="Stable control and protection")
    bottom_right: QuadrantLabel = QuadrantLabel(title="Anchor", subtitle="Supportive people continuity")


class CareerQuadrant(BaseModel):
    x: float
    y: float
    detail: str
    labels: QuadrantLabels = QuadrantLabels()


def build_radar_data(profile: RoleGroupScores) -> list[RadarDatum]:
    """Priorité de recrutement par axe : plus le groupe couvre l'axe, moins il faut recruter."""
    raw = {role: 0.0 for role, _ in RADAR_AXES}
    for key, axes in GROUP_AXES.items():
        score = profile.score_of(key)
        for axis in axes:
            raw[axis] += score

    data = []
    for role, icon in RADAR_AXES:
        # deux groupes au plus touchent un même axe
        normalized = clamp_score(raw[role] / 2)
        data.append(RadarDatum(role=role, icon=icon, ideal=clamp_score(round_score(10 - normalized))))
    return data


def _axis_position(diff: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return clamp_score(diff / total * 10, low=-10.0, high=10.0)


def build_career_quadrant(profile: RoleGroupScores) -> CareerQuadrant:
    """Position du profil sur les axes structure/élan (x) et initiative/soutien (y)."""
    architect = profile.score_of(RoleGroupKey.ARCHITECT)
    guardian = profile.score_of(RoleGroupKey.GUARDIAN)
    catalyst = profile.score_of(RoleGroupKey.CATALYST)
    anchor = profile.score_of(RoleGroupKey.ANCHOR)

    structure = architect + guardian
    momentum = catalyst + anchor
    drive = architect + catalyst
    support = guardian + anchor
    total = structure + momentum

    if structure > momentum:
        horizontal = "Leans toward structure and control (Architect/Guardian)."
    elif momentum > structure:
        horizontal = "Leans toward momentum and outreach (Catalyst/Anchor)."
    else:
        horizontal = "Balanced between structure and momentum."

    if drive > support:
        vertical = "Stronger on initiative and drive (Architect/Catalyst)."
    elif support > drive:
        vertical = "Stronger on stability and support (Guardian/Anchor)."
    else:
        vertical = "Balanced between drive and support."

    return CareerQuadrant(
        x=_axis_position(momentum - structure, total),
        y=_axis_position(drive - support, total),
        detail=f"{horizontal} {vertical}",
    )


def format_career_axis(axis: Literal["x", "y"], value: float) -> str:
    """Libellé d'un axe du quadrant, ex. ``Momentum (+3.3)`` ou ``Support (-2.0)``."""
    magnitude = f"{round_score(clamp_score(abs(value))):.1f}"
    if axis == "x":
        return f"Momentum (+{magnitude})" if value >= 0 else f"Structure (-{magnitude})"
    return f"Drive (+{magnitude})" if value >= 0 else f"Support (-{magnitude})"
