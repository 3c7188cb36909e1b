"""Classement des étoiles du palais de Carrière en quatre groupes de rôles.

Objectif du module
------------------
- Déclarer les groupes Architect / Guardian / Catalyst / Anchor (étoiles, traits, métiers).
- Compter les étoiles reconnues de chaque groupe et en déduire un score de couverture 0–10.
- Basculer sur le palais du Conjoint (夫妻) quand la Carrière n'a aucune étoile reconnue.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

import structlog
from pydantic import BaseModel, Field

from ziwei_report.domain.archetype_scorer import clamp_score, round_score
from ziwei_report.domain.entities import Chart
from ziwei_report.domain.vocabulary import PalaceCategory, normalize_marker_name

log = structlog.get_logger(__name__)


class RoleGroupKey(str, Enum):
    ARCHITECT = "architect"
    GUARDIAN = "guardian"
    CATALYST = "catalyst"
    ANCHOR = "anchor"


ROLE_GROUP_ORDER: tuple[RoleGroupKey, ...] = tuple(RoleGroupKey)


@dataclass(frozen=True)
class RoleGroup:
    key: RoleGroupKey
    label: str
    members: tuple[str, ...]
    member_names: tuple[str, ...]
    traits: tuple[str, ...]
    occupations: tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.members)


ROLE_GROUPS: Mapping[RoleGroupKey, RoleGroup] = MappingProxyType(
    {
        RoleGroupKey.ARCHITECT: RoleGroup(
            key=RoleGroupKey.ARCHITECT,
            label="Architect",
            members=("紫微", "廉贞", "天机", "天梁"),
            member_names=("Zi Wei", "Lian Zhen", "Tian Ji", "Tian Liang"),
            traits=(
                "Organized",
                "Strategic",
                "Disciplined",
                "Dependable",
                "Calm under pressure",
                "Long-term oriented",
            ),
            occupations=(
                "Chief Operating Officer",
                "Operations Manager",
                "Strategy Manager",
                "Project Manager",
                "Program Manager",
                "Business Operations Manager",
                "Compliance Manager",
                "Quality Assurance Manager",
                "Human Resources Manager",
                "Business Analyst",
            ),
        ),
        RoleGroupKey.GUARDIAN: RoleGroup(
            key=RoleGroupKey.GUARDIAN,
            label="Guardian",
            members=("武曲", "天府", "太阴"),
            member_names=("Wu Qu", "Tian Fu", "Tai Yin"),
            traits=(
                "Careful",
                "Detail-oriented",
                "Trustworthy",
                "Steady",
                "Risk-aware",
                "Financially responsible",
            ),
            occupations=(
                "Chief Financial Officer",
                "Finance Manager",
                "Financial Analyst",
                "Accountant",
                "Auditor",
                "Risk Manager",
                "Credit Analyst",
                "Procurement Manager",
                "Treasury Manager",
                "Controller",
            ),
        ),
        RoleGroupKey.CATALYST: RoleGroup(
            key=RoleGroupKey.CATALYST,
            label="Catalyst",
            members=("贪狼", "巨门", "太阳", "七杀", "破军"),
            member_names=("Tan Lang", "Ju Men", "Tai Yang", "Qi Sha", "Po Jun"),
            traits=("Confident", "Persuasive", "Energetic", "Bold", "Proactive", "Resilient"),
            occupations=(
                "Sales Manager",
                "Business Development Manager",
                "Marketing Manager",
                "Growth Manager",
                "Partnerships Manager",
                "Brand Manager",
                "Public Relations Manager",
                "Communications Manager",
                "Account Manager",
                "Customer Acquisition Manager",
            ),
        ),
        RoleGroupKey.ANCHOR: RoleGroup(
            key=RoleGroupKey.ANCHOR,
            label="Anchor",
            members=("天同", "天相", "左辅", "右弼", "文曲", "文昌"),
            member_names=("Tian Tong", "Tian Xiang", "Zuo Fu", "You Bi", "Wen Qu", "Wen Chang"),
            traits=("Supportive", "Patient", "Empathetic", "Cooperative", "Reliable", "Service-minded"),
            occupations=(
                "Chief of Staff",
                "Human Resources Manager",
                "People Operations Manager",
                "Customer Success Manager",
                "Client Services Manager",
                "Training Manager",
                "Internal Communications Manager",
                "Executive Assistant",
                "Operations Coordinator",
                "Office Manager",
            ),
        ),
    }
)

MARKER_TO_GROUP: Mapping[str, RoleGroupKey] = MappingProxyType(
    {member: group.key for group in ROLE_GROUPS.values() for member in group.members}
)


class GroupScore(BaseModel):
    key: RoleGroupKey
    label: str
    count: int
    score: float


class RoleGroupScores(BaseModel):
    """Scores des 4 groupes (ordre fixe) pour une liste d'étoiles."""

    scores: list[GroupScore]
    present_groups: list[RoleGroupKey] = Field(default_factory=list)
    missing_groups: list[RoleGroupKey] = Field(default_factory=list)
    recognized_any: bool = False
    analysis_markers: list[str] = Field(default_factory=list)

    def score_of(self, key: RoleGroupKey) -> float:
        for entry in self.scores:
            if entry.key is key:
                return entry.score
        return 0.0


class RoleGroupProfile(RoleGroupScores):
    """Scores de groupes enrichis de la provenance (Carrière ou Conjoint)."""

    used_substitute: bool = False
    source_palace: PalaceCategory | None = None
    career_markers: list[str] = Field(default_factory=list)
    spouse_markers: list[str] = Field(default_factory=list)


def group_for_marker(name: str) -> RoleGroupKey | None:
    return MARKER_TO_GROUP.get(normalize_marker_name(name))


def score_group_coverage(count: int, max_size: int) -> float:
    """Score de couverture d'un groupe : 0 si vide, puis 6 → 10 selon la part du groupe présente."""
    if count <= 0:
        return 0.0
    if max_size <= 1:
        return 10.0
    scaled = 6 + (count - 1) / (max_size - 1) * 4
    return clamp_score(round_score(scaled))


def _recognized_count(markers: Iterable[str]) -> int:
    return sum(1 for name in markers if group_for_marker(name) is not None)


def classify_groups(markers: Iterable[str]) -> RoleGroupScores:
    """Compte les étoiles par groupe ; les étoiles hors groupes sont ignorées."""
    analysis_markers = list(markers)
    counts = dict.fromkeys(ROLE_GROUP_ORDER, 0)
    for name in analysis_markers:
        key = group_for_marker(name)
        if key is not None:
            counts[key] += 1

    scores = [
        GroupScore(
            key=key,
            label=ROLE_GROUPS[key].label,
            count=counts[key],
            score=score_group_coverage(counts[key], ROLE_GROUPS[key].size),
        )
        for key in ROLE_GROUP_ORDER
    ]
    return RoleGroupScores(
        scores=scores,
        present_groups=[s.key for s in scores if s.count > 0],
        missing_groups=[s.key for s in scores if s.count == 0],
        recognized_any=any(s.count > 0 for s in scores),
        analysis_markers=analysis_markers,
    )


def analyze_role_groups(chart: Chart) -> RoleGroupProfile:
    """Profil de groupes de rôles du thème (palais 官禄, repli sur 夫妻).

    Le Conjoint remplace la Carrière seulement si la Carrière n'a aucune étoile reconnue et que
    le Conjoint en a au moins une.
    """
    career = chart.find_palace(PalaceCategory.CAREER)
    spouse = chart.find_palace(PalaceCategory.SPOUSE)
    career_markers = career.all_markers() if career is not None else []
    spouse_markers = spouse.all_markers() if spouse is not None else []

    used_substitute = _recognized_count(career_markers) == 0 and _recognized_count(spouse_markers) > 0
    if used_substitute:
        log.info("role_group_substitute_used", source="spouse", markers=len(spouse_markers))
        source = PalaceCategory.SPOUSE
        groups = classify_groups(spouse_markers)
    else:
        source = PalaceCategory.CAREER if career is not None else None
        groups = classify_groups(career_markers)

    return RoleGroupProfile(
        **groups.model_dump(),
        used_substitute=used_substitute,
        source_palace=source,
        career_markers=career_markers,
        spouse_markers=spouse_markers,
    )
