"""Classification saisonnière des palais (grand cycle Dayun).

Objectif du module
------------------
- Associer chacune des 12 catégories de palais à l'une des 4 saisons.
- Fournir les thèmes, messages et données de présentation statiques de chaque saison.

🌱 Printemps (croissance) : Carrière, Voyage, Amis
☀️ Été (récolte) : Richesse, Propriété, Bien-être
🍂 Automne (défense) : Conjoint, Fratrie, Enfants, Parents
❄️ Hiver (réinitialisation) : Vie, Santé
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from ziwei_report.domain.errors import UnrecognizedPalaceError
from ziwei_report.domain.vocabulary import PalaceCategory, palace_category


class SeasonCategory(str, Enum):
    """Les quatre saisons narratives d'un grand cycle."""

    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


PALACE_TO_SEASON = MappingProxyType(
    {
        PalaceCategory.CAREER: SeasonCategory.SPRING,
        PalaceCategory.TRAVEL: SeasonCategory.SPRING,
        PalaceCategory.FRIENDS: SeasonCategory.SPRING,
        PalaceCategory.WEALTH: SeasonCategory.SUMMER,
        PalaceCategory.PROPERTY: SeasonCategory.SUMMER,
        PalaceCategory.WELLBEING: SeasonCategory.SUMMER,
        PalaceCategory.SPOUSE: SeasonCategory.AUTUMN,
        PalaceCategory.SIBLINGS: SeasonCategory.AUTUMN,
        PalaceCategory.CHILDREN: SeasonCategory.AUTUMN,
        PalaceCategory.PARENTS: SeasonCategory.AUTUMN,
        PalaceCategory.LIFE: SeasonCategory.WINTER,
        PalaceCategory.HEALTH: SeasonCategory.WINTER,
    }
)

SEASON_TITLES = MappingProxyType(
    {
        SeasonCategory.SPRING: "Expand, Grow, Move",
        SeasonCategory.SUMMER: "Activate, Leverage, Monetize",
        SeasonCategory.AUTUMN: "Cut, Secure, Protect",
        SeasonCategory.WINTER: "Reskill, Prepare, Rebuild",
    }
)

SEASON_MESSAGES = MappingProxyType(
    {
        SeasonCategory.SPRING: (
            "This is your green light season. The doors open easier. People say yes faster. "
            "Launch, expand, and move forward with confidence."
        ),
        SeasonCategory.SUMMER: (
            "This is your harvest season. Stop waiting and start activating what you already have. "
            "It's time to cash in, monetize, and collect the fruits of your work."
        ),
        SeasonCategory.AUTUMN: (
            "This is your safety net season. Cut emotional noise, patch up holes, and strengthen your "
            "foundation. Protect what you've built and prepare for what's next."
        ),
        SeasonCategory.WINTER: (
            "This is your reload season. Quietly sharpen your sword, rebuild your arsenal, and prepare "
            "yourself. When the season turns, you'll be ready to strike."
        ),
    }
)

# Présentation uniquement (consommé par la couche de rendu)
SEASON_ICONS = MappingProxyType(
    {
        SeasonCategory.SPRING: "🌱",
        SeasonCategory.SUMMER: "☀️",
        SeasonCategory.AUTUMN: "🍂",
        SeasonCategory.WINTER: "❄️",
    }
)

SEASON_COLORS = MappingProxyType(
    {
        SeasonCategory.SPRING: {
            "gradient": "from-green-500 to-emerald-500",
            "primary": "#10b981",
            "bg": "from-green-50 to-emerald-50",
        },
        SeasonCategory.SUMMER: {
            "gradient": "from-amber-500 to-yellow-500",
            "primary": "#f59e0b",
            "bg": "from-amber-50 to-yellow-50",
        },
        SeasonCategory.AUTUMN: {
            "gradient": "from-orange-500 to-red-500",
            "primary": "#f97316",
            "bg": "from-orange-50 to-red-50",
        },
        SeasonCategory.WINTER: {
            "gradient": "from-blue-500 to-cyan-500",
            "primary": "#3b82f6",
            "bg": "from-blue-50 to-cyan-50",
        },
    }
)


def classify(palace_name: str | PalaceCategory) -> SeasonCategory:
    """Return the season governed by a palace.

    Args:
        palace_name: Nom chinois (graphie simplifiée ou traditionnelle) ou catégorie.

    Returns:
        SeasonCategory: Saison associée.

    Raises:
        UnrecognizedPalaceError: Nom hors vocabulaire (donnée amont corrompue).
    """
    return PALACE_TO_SEASON[palace_category(palace_name)]


def theme_for(season: SeasonCategory) -> str:
    return SEASON_TITLES[season]


def message_for(season: SeasonCategory) -> str:
    return SEASON_MESSAGES[season]


def icon_for(season: SeasonCategory) -> str:
    return SEASON_ICONS[season]


def colors_for(season: SeasonCategory) -> dict[str, str]:
    return dict(SEASON_COLORS[season])


def is_palace_in_season(palace_name: str, season: SeasonCategory) -> bool:
    """Indique si le palais relève de la saison ; False pour un nom inconnu."""
    try:
        return classify(palace_name) is season
    except UnrecognizedPalaceError:
        return False
