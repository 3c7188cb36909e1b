"""Vocabulaires fermés du thème : catégories de palais et noms d'étoiles.

Objectif du module
------------------
- Exposer les 12 catégories de palais sous forme d'énumération ordonnée (ordre fixe du thème).
- Replier les 16 graphies (simplifiées / traditionnelles) sur ces 12 catégories.
- Replier les graphies traditionnelles des étoiles sur la graphie simplifiée des catalogues.

La logique interne ne compare jamais de chaînes brutes : tout passe par `palace_category`
et `normalize_marker_name`.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from ziwei_report.domain.errors import UnrecognizedPalaceError


class PalaceCategory(str, Enum):
    """Les 12 domaines de vie, déclarés dans l'ordre fixe du thème (命宫 → 父母)."""

    LIFE = "life"
    SIBLINGS = "siblings"
    SPOUSE = "spouse"
    CHILDREN = "children"
    WEALTH = "wealth"
    HEALTH = "health"
    TRAVEL = "travel"
    FRIENDS = "friends"
    CAREER = "career"
    PROPERTY = "property"
    WELLBEING = "wellbeing"
    PARENTS = "parents"

    @property
    def ordinal(self) -> int:
        """Position 0–11 dans l'ordre fixe ; sert aussi d'index de mois."""
        return PALACE_ORDER.index(self)

    @property
    def chinese_name(self) -> str:
        """Graphie canonique (simplifiée)."""
        return CANONICAL_NAMES[self]

    @property
    def english_name(self) -> str:
        return ENGLISH_NAMES[self]


PALACE_ORDER: tuple[PalaceCategory, ...] = tuple(PalaceCategory)

CANONICAL_NAMES = MappingProxyType(
    {
        PalaceCategory.LIFE: "命宫",
        PalaceCategory.SIBLINGS: "兄弟",
        PalaceCategory.SPOUSE: "夫妻",
        PalaceCategory.CHILDREN: "子女",
        PalaceCategory.WEALTH: "财帛",
        PalaceCategory.HEALTH: "疾厄",
        PalaceCategory.TRAVEL: "迁移",
        PalaceCategory.FRIENDS: "交友",
        PalaceCategory.CAREER: "官禄",
        PalaceCategory.PROPERTY: "田宅",
        PalaceCategory.WELLBEING: "福德",
        PalaceCategory.PARENTS: "父母",
    }
)

ENGLISH_NAMES = MappingProxyType(
    {
        PalaceCategory.LIFE: "Life Palace",
        PalaceCategory.SIBLINGS: "Siblings Palace",
        PalaceCategory.SPOUSE: "Spouse Palace",
        PalaceCategory.CHILDREN: "Children Palace",
        PalaceCategory.WEALTH: "Wealth Palace",
        PalaceCategory.HEALTH: "Health Palace",
        PalaceCategory.TRAVEL: "Travel Palace",
        PalaceCategory.FRIENDS: "Friends Palace",
        PalaceCategory.CAREER: "Career Palace",
        PalaceCategory.PROPERTY: "Property Palace",
        PalaceCategory.WELLBEING: "Wellbeing Palace",
        PalaceCategory.PARENTS: "Parents Palace",
    }
)

# 16 graphies acceptées en entrée
PALACE_ALIASES = MappingProxyType(
    {
        "命宮": PalaceCategory.LIFE,
        "命宫": PalaceCategory.LIFE,
        "兄弟": PalaceCategory.SIBLINGS,
        "夫妻": PalaceCategory.SPOUSE,
        "子女": PalaceCategory.CHILDREN,
        "財帛": PalaceCategory.WEALTH,
        "财帛": PalaceCategory.WEALTH,
        "疾厄": PalaceCategory.HEALTH,
        "遷移": PalaceCategory.TRAVEL,
        "迁移": PalaceCategory.TRAVEL,
        "交友": PalaceCategory.FRIENDS,
        "官禄": PalaceCategory.CAREER,
        "官祿": PalaceCategory.CAREER,
        "田宅": PalaceCategory.PROPERTY,
        "福德": PalaceCategory.WELLBEING,
        "父母": PalaceCategory.PARENTS,
    }
)

# Graphies traditionnelles → graphie simplifiée des catalogues
MARKER_ALIASES = MappingProxyType(
    {
        "天機": "天机",
        "廉貞": "廉贞",
        "太陰": "太阴",
        "貪狼": "贪狼",
        "巨門": "巨门",
        "太陽": "太阳",
        "七殺": "七杀",
        "破軍": "破军",
        "左輔": "左辅",
    }
)


def palace_category(name: str | PalaceCategory) -> PalaceCategory:
    """Replie un nom de palais sur sa catégorie.

    Raises:
        UnrecognizedPalaceError: si le nom n'appartient pas au vocabulaire.
    """
    if isinstance(name, PalaceCategory):
        return name
    category = PALACE_ALIASES.get(name.strip()) if isinstance(name, str) else None
    if category is None:
        raise UnrecognizedPalaceError(name)
    return category


def is_known_palace_name(name: str) -> bool:
    return isinstance(name, str) and name.strip() in PALACE_ALIASES


def english_palace_name(name: str) -> str:
    """Libellé anglais ; renvoie le nom tel quel s'il est inconnu (affichage seulement)."""
    if is_known_palace_name(name):
        return palace_category(name).english_name
    return name


def normalize_marker_name(name: str) -> str:
    stripped = name.strip()
    return MARKER_ALIASES.get(stripped, stripped)
