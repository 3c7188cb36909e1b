"""
Entités du domaine métier.

Ce module définit le modèle de données du thème Zi Wei Dou Shu tel que produit par le générateur
amont : 12 palais numérotés, chacun avec son intervalle de grand cycle (MajorLimit), son flux
annuel éventuel et ses étoiles réparties en emplacements.

Les entités sont immuables une fois construites.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ziwei_report.domain.errors import UnrecognizedPalaceError
from ziwei_report.domain.vocabulary import (
    PalaceCategory,
    is_known_palace_name,
    normalize_marker_name,
    palace_category,
)

PALACE_COUNT = 12

_FROZEN = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Marker(BaseModel):
    """Étoile (marqueur symbolique) identifiée par son nom."""

    model_config = _FROZEN

    name: str

    @property
    def normalized_name(self) -> str:
        return normalize_marker_name(self.name)


class MajorLimit(BaseModel):
    """Intervalle d'âge [start_age, end_age] (bornes incluses) du grand cycle de 10 ans."""

    model_config = _FROZEN

    start_age: int = Field(alias="startAge")
    end_age: int = Field(alias="endAge")

    @model_validator(mode="after")
    def _check_bounds(self) -> MajorLimit:
        if self.end_age < self.start_age:
            raise ValueError("major limit end_age must be >= start_age")
        return self

    def contains(self, age: int) -> bool:
        return self.start_age <= age <= self.end_age


class AnnualFlow(BaseModel):
    """Année civile représentée par le palais pour le cycle solaire courant."""

    model_config = _FROZEN

    year: int


class Palace(BaseModel):
    """Palais du thème et ses emplacements d'étoiles."""

    model_config = _FROZEN

    number: int = Field(ge=1, le=PALACE_COUNT)
    name: str
    major_limit: MajorLimit | None = Field(default=None, alias="majorLimit")
    annual_flow: AnnualFlow | None = Field(default=None, alias="annualFlow")
    main_stars: tuple[Marker, ...] = Field(default=(), alias="mainStar")
    minor_stars: tuple[Marker, ...] = Field(default=(), alias="minorStars")
    auxiliary_stars: tuple[Marker, ...] = Field(default=(), alias="auxiliaryStars")
    year_stars: tuple[Marker, ...] = Field(default=(), alias="yearStars")
    month_stars: tuple[Marker, ...] = Field(default=(), alias="monthStars")
    day_stars: tuple[Marker, ...] = Field(default=(), alias="dayStars")
    hour_stars: tuple[Marker, ...] = Field(default=(), alias="hourStars")
    body_star: Marker | None = Field(default=None, alias="bodyStar")
    life_star: Marker | None = Field(default=None, alias="lifeStar")

    @property
    def category(self) -> PalaceCategory:
        """Catégorie repliée ; lève `UnrecognizedPalaceError` hors vocabulaire."""
        return palace_category(self.name)

    def core_markers(self) -> list[str]:
        """Étoiles principales, mineures et auxiliaires (analyse de richesse)."""
        return [m.name for m in (*self.main_stars, *self.minor_stars, *self.auxiliary_stars)]

    def all_markers(self) -> list[str]:
        """Toutes les étoiles du palais, emplacements annuels compris."""
        singles = [m for m in (self.body_star, self.life_star) if m is not None]
        return [
            m.name
            for m in (
                *self.main_stars,
                *singles,
                *self.minor_stars,
                *self.auxiliary_stars,
                *self.year_stars,
                *self.month_stars,
                *self.day_stars,
                *self.hour_stars,
            )
        ]


class ChartInput(BaseModel):
    """Données de naissance accompagnant le thème."""

    model_config = _FROZEN

    year: int
    month: int = Field(default=1, ge=1, le=12)
    day: int = Field(default=1, ge=1, le=31)
    hour: int = Field(default=0, ge=0, le=23)
    name: str | None = None


class Chart(BaseModel):
    """Thème complet : exactement 12 palais de numéros 1–12 et de noms uniques."""

    model_config = _FROZEN

    input: ChartInput
    palaces: tuple[Palace, ...]

    @model_validator(mode="after")
    def _check_palaces(self) -> Chart:
        if len(self.palaces) != PALACE_COUNT:
            raise ValueError(f"chart must hold exactly {PALACE_COUNT} palaces, got {len(self.palaces)}")
        numbers = {p.number for p in self.palaces}
        if numbers != set(range(1, PALACE_COUNT + 1)):
            raise ValueError("palace numbers must be unique and cover 1..12")
        # graphies d'une même catégorie repliées ; les noms inconnus restent bruts
        keys = [palace_category(p.name) if is_known_palace_name(p.name) else p.name for p in self.palaces]
        if len(set(keys)) != len(keys):
            raise ValueError("palace names must be unique within a chart (spelling variants included)")
        return self

    @property
    def birth_year(self) -> int:
        return self.input.year

    def find_palace(self, category: PalaceCategory) -> Palace | None:
        """Premier palais de la catégorie demandée (alias repliés), sinon None.

        Les palais au nom inconnu sont ignorés ici : la recherche par catégorie ne juge pas le
        vocabulaire, c'est le rôle de la classification des saisons.
        """
        for palace in self.palaces:
            try:
                if palace.category is category:
                    return palace
            except UnrecognizedPalaceError:
                continue
        return None

    def palace_by_number(self, number: int) -> Palace | None:
        for palace in self.palaces:
            if palace.number == number:
                return palace
        return None
