from __future__ import annotations

from dataclasses import dataclass, field

"""Column mapping between Recipe fields and the published sheet headers.

The sheet is maintained by hand, so headers are human-readable French titles.
Lookups are done on the exact header text; nothing is fuzzy-matched.
"""

__all__ = [
    "ColumnMapping",
    "DEFAULT_HEADERS",
    "DEFAULT_ID_HEADER",
    "NAME_FIELD",
]

NAME_FIELD = "nom"
DEFAULT_ID_HEADER = "ID"

# Recipe field -> header text (sheet column order)
DEFAULT_HEADERS: dict[str, str] = {
    "type": "Type (sucré/salé)",
    "difficulte": "Difficulté (Facile/Moyen/Difficile)",
    "temps_preparation_min": "Temps de préparation (min)",
    "categorie_temps": "Catégorie temps (sélection)",
    "nb_personnes": "Nombre de personnes",
    "nom": "Nom de la recette",
    "description_courte": "Description courte",
    "ingredients": "Ingrédients + quantités (séparés par ;)",
    "instructions": "Instructions (étapes séparées par ;)",
    "equipements": "Équipements nécessaires (séparés par ;)",
    "calories": "Calories (pour une portion)",
    "image_url": "image_url",
}


@dataclass(frozen=True)
class ColumnMapping:
    """Field -> header table applied uniformly to every row.

    ``id_header`` is optional in the sheet: when the column is missing or the
    cell is empty, a placeholder id is generated instead.
    """
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    id_header: str = DEFAULT_ID_HEADER

    def header_for(self, field_name: str) -> str:
        return self.headers[field_name]

    @property
    def expected_columns(self) -> list[str]:
        """Headers whose absence is reported as a diagnostic (id excluded)."""
        return list(self.headers.values())

    def with_overrides(self, overrides: dict[str, str] | None, id_header: str | None = None) -> ColumnMapping:
        merged = dict(self.headers)
        if overrides:
            unknown = set(overrides) - set(merged)
            if unknown:
                raise KeyError(f"unknown recipe fields: {sorted(unknown)}")
            merged.update(overrides)
        return ColumnMapping(headers=merged, id_header=id_header or self.id_header)
