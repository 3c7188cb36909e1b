"""Agrégation des étoiles du palais de la Richesse en vecteur d'archétypes.

Objectif du module
------------------
- Filtrer les étoiles reconnues par le catalogue (graphies repliées).
- Pondérer les contributions par rang d'apparition (1, 1/2, 1/3, ...).
- Borner à [0, 10], arrondir au dixième, trier de façon stable par score décroissant.
- Qualifier la forme du profil (spécialisé / hybride / équilibré).

Le palais du Bien-être (福德) sert de repli quand la Richesse ne porte aucune étoile reconnue.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Iterable, Sequence

import structlog
from pydantic import BaseModel, Field

from ziwei_report.domain.archetype_catalog import (
    ARCHETYPE_ORDER,
    ARCHETYPES,
    ArchetypeKey,
    CareerRecommendation,
    StarArchetypeEntry,
    get_star_entry,
)
from ziwei_report.domain.entities import Chart
from ziwei_report.domain.vocabulary import PalaceCategory

log = structlog.get_logger(__name__)

SCORE_MIN = 0.0
SCORE_MAX = 10.0
STRENGTHS_PER_ARCHETYPE = 2
MAX_STRENGTHS = 4
MAX_BLIND_SPOTS = 4
MAX_IDEAL_ROLES = 6
MAX_NON_IDEAL_ROLES = 4
UNKNOWN_ARCHETYPE = "Unknown"
NO_STARS_SUMMARY = (
    "No recognized wealth stars were found in the Wealth or Wellbeing palace, "
    "so a wealth code cannot be derived for this chart."
)


class ProfileShape(str, Enum):
    SPECIALIZED = "specialized"
    HYBRID = "hybrid"
    BALANCED = "balanced"


class ArchetypeScore(BaseModel):
    key: ArchetypeKey
    label: str
    score: float


class ArchetypeScores(BaseModel):
    """Vecteur trié et provenance du calcul."""

    vector: list[ArchetypeScore] = Field(default_factory=list)
    recognized_any: bool = False
    used_fallback: bool = False
    recognized: list[str] = Field(default_factory=list)

    @property
    def top(self) -> ArchetypeKey | None:
        return self.vector[0].key if self.vector else None

    def as_dict(self) -> dict[ArchetypeKey, float]:
        return {entry.key: entry.score for entry in self.vector}


class StarContribution(BaseModel):
    """Fiche d'une étoile reconnue, pour le détail du rapport."""

    name: str
    english_name: str
    primary: ArchetypeKey
    short_note: str
    money_making_path: str
    as_employee: str
    as_boss: str


class ArchetypeProfile(BaseModel):
    """Profil de richesse complet d'un thème."""

    client_name: str | None = None
    vector: list[ArchetypeScore] = Field(default_factory=list)
    profile_shape: ProfileShape = ProfileShape.SPECIALIZED
    dominant_key: ArchetypeKey | None = None
    dominant_archetype: str = UNKNOWN_ARCHETYPE
    summary: str = NO_STARS_SUMMARY
    stars: list[StarContribution] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    blind_spots: list[str] = Field(default_factory=list)
    ideal_roles: list[CareerRecommendation] = Field(default_factory=list)
    non_ideal_roles: list[CareerRecommendation] = Field(default_factory=list)
    recognized_any: bool = False
    source_palace: PalaceCategory | None = None
    used_fallback: bool = False


def round_score(value: float) -> float:
    """Arrondi au dixième, demi vers le haut, sur la valeur binaire exacte."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def clamp_score(value: float, low: float = SCORE_MIN, high: float = SCORE_MAX) -> float:
    return max(low, min(high, value))


def _recognized_entries(markers: Iterable[str]) -> list[StarArchetypeEntry]:
    entries = []
    for name in markers:
        entry = get_star_entry(name)
        if entry is not None:
            entries.append(entry)
    return entries


def _aggregate(entries: Sequence[StarArchetypeEntry]) -> list[ArchetypeScore]:
    vector = []
    for key in ARCHETYPE_ORDER:
        weighted = 0.0
        weights = 0.0
        for rank, entry in enumerate(entries):
            weight = 1 / (rank + 1)
            weighted += entry.scores[key] * weight
            weights += weight
        if weights == 0:
            continue
        score = round_score(clamp_score(weighted / weights))
        vector.append(ArchetypeScore(key=key, label=ARCHETYPES[key].label, score=score))
    # sorted() est stable : à score égal, l'ordre du catalogue est conservé
    return sorted(vector, key=lambda s: s.score, reverse=True)


def score_archetypes(
    markers: Iterable[str], fallback_markers: Iterable[str] | None = None
) -> ArchetypeScores:
    """Calcule le vecteur d'archétypes d'une liste d'étoiles.

    Args:
        markers: Étoiles du palais principal, dans l'ordre d'apparition.
        fallback_markers: Étoiles du palais de repli, utilisées une seule fois si aucune
            étoile principale n'est reconnue.

    Returns:
        ArchetypeScores: vecteur trié (vide si rien n'est reconnu) et provenance.
    """
    entries = _recognized_entries(markers)
    used_fallback = False
    if not entries and fallback_markers is not None:
        entries = _recognized_entries(fallback_markers)
        used_fallback = bool(entries)
    if not entries:
        return ArchetypeScores()
    return ArchetypeScores(
        vector=_aggregate(entries),
        recognized_any=True,
        used_fallback=used_fallback,
        recognized=[e.chinese_name for e in entries],
    )


def classify_profile(vector: Sequence[ArchetypeScore]) -> ProfileShape:
    """Qualifie la forme d'un vecteur trié par score décroissant."""
    if len(vector) < 2:
        return ProfileShape.SPECIALIZED
    top, second = vector[0].score, vector[1].score
    if top > 7.5 and second < 6:
        return ProfileShape.SPECIALIZED
    scores = [s.score for s in vector]
    if max(scores) - min(scores) <= 2:
        return ProfileShape.BALANCED
    if top > 6.5 and second > 6.5 and top - second < 2.5:
        return ProfileShape.HYBRID
    return ProfileShape.SPECIALIZED


def _collect(items_per_key: Iterable[Sequence[str]], per_key: int, cap: int) -> list[str]:
    collected: list[str] = []
    for items in items_per_key:
        collected.extend(items[:per_key])
    return collected[:cap]


def _careers(
    entries: Iterable[StarArchetypeEntry], top_keys: set[ArchetypeKey], ideal: bool, cap: int
) -> list[CareerRecommendation]:
    seen: set[str] = set()
    careers: list[CareerRecommendation] = []
    for entry in entries:
        if entry.primary not in top_keys:
            continue
        for career in entry.ideal_careers if ideal else entry.non_ideal_careers:
            if career.role in seen:
                continue
            seen.add(career.role)
            careers.append(career)
    return careers[:cap]


def analyze_wealth_profile(chart: Chart, client_name: str | None = None) -> ArchetypeProfile:
    """Profil de richesse du thème (palais 财帛, repli sur 福德).

    Paramètres:
    - chart: thème validé.
    - client_name: nom affiché dans le rapport (optionnel).

    Retour: `ArchetypeProfile`, avec `recognized_any=False` si aucune étoile n'est reconnue.
    """
    wealth = chart.find_palace(PalaceCategory.WEALTH)
    wellbeing = chart.find_palace(PalaceCategory.WELLBEING)
    primary_markers = wealth.core_markers() if wealth is not None else []
    fallback_markers = wellbeing.core_markers() if wellbeing is not None else []

    scores = score_archetypes(primary_markers, fallback_markers)
    if not scores.recognized_any:
        log.info("archetype_no_recognized_stars", client=client_name)
        return ArchetypeProfile(client_name=client_name)
    if scores.used_fallback:
        log.info("archetype_fallback_used", client=client_name, source="wellbeing")

    entries = _recognized_entries(scores.recognized)
    top_keys = [s.key for s in scores.vector[:2]]
    dominant = scores.vector[0].key
    return ArchetypeProfile(
        client_name=client_name,
        vector=scores.vector,
        profile_shape=classify_profile(scores.vector),
        dominant_key=dominant,
        dominant_archetype=ARCHETYPES[dominant].label,
        summary=ARCHETYPES[dominant].summary,
        stars=[
            StarContribution(
                name=e.chinese_name,
                english_name=e.english_name,
                primary=e.primary,
                short_note=e.short_note,
                money_making_path=e.money_making_path,
                as_employee=e.as_employee,
                as_boss=e.as_boss,
            )
            for e in entries
        ],
        strengths=_collect(
            (ARCHETYPES[k].strengths for k in top_keys), STRENGTHS_PER_ARCHETYPE, MAX_STRENGTHS
        ),
        blind_spots=_collect(
            (ARCHETYPES[k].blind_spots for k in top_keys), STRENGTHS_PER_ARCHETYPE, MAX_BLIND_SPOTS
        ),
        ideal_roles=_careers(entries, set(top_keys), ideal=True, cap=MAX_IDEAL_ROLES),
        non_ideal_roles=_careers(entries, set(top_keys), ideal=False, cap=MAX_NON_IDEAL_ROLES),
        recognized_any=True,
        source_palace=PalaceCategory.WELLBEING if scores.used_fallback else PalaceCategory.WEALTH,
        used_fallback=scores.used_fallback,
    )
