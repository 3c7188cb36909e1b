"""Type résultat étiqueté : `Ok` / `NotFound` / `Invalid`.

Deux politiques d'erreur coexistent dans le moteur : l'absence structurelle (fréquente, attendue)
et la violation de vocabulaire (donnée amont corrompue). Ce module les garde distinctes au niveau
des services plutôt que de tout ramener à des exceptions ou à `None`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Résultat disponible."""

    value: T
    status: Literal["ok"] = "ok"


@dataclass(frozen=True)
class NotFound:
    """Absence structurelle : rien à afficher, l'appelant montre un état « pas de données »."""

    reason: str
    status: Literal["not_found"] = "not_found"


@dataclass(frozen=True)
class Invalid:
    """Donnée amont invalide (ex. nom de palais inconnu)."""

    code: str
    reason: str
    details: dict[str, Any] | None = None
    status: Literal["invalid"] = "invalid"


Lookup = Ok[T] | NotFound | Invalid
