"""Erreurs du domaine.

Seules les violations de vocabulaire sont des erreurs : l'absence d'un cycle, d'un flux annuel
ou d'étoiles reconnues est un état normal d'un thème et se représente par un résultat vide.
"""

from __future__ import annotations


class UnrecognizedPalaceError(ValueError):
    """Nom de palais hors du vocabulaire fixe (16 graphies, 12 catégories)."""

    code = "UNRECOGNIZED_PALACE"

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown palace name: {name!r}")
        self.name = name


class InvalidCreationDateError(ValueError):
    """Date de création du rapport absente ou illisible."""

    code = "INVALID_CREATION_DATE"

    def __init__(self, value: object) -> None:
        super().__init__("Report creation date is missing or invalid.")
        self.value = value
