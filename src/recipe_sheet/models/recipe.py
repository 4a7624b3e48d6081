from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any

"""Recipe record handed to the display layer.

Strings are already trimmed. temps_preparation_min and nb_personnes fall back
to 0, while calories stays None when the sheet cell is empty so that
"not provided" and "zero calories" remain distinguishable.
"""

__all__ = [
    "Recipe",
]


@dataclass(frozen=True)
class Recipe:
    """One row of the recipe sheet after validation and normalization.

    Attributes:
        id: ID column value, or "R_<n>" with n the 1-based row position before filtering
        type: sweet/savory label (free text)
        difficulte: difficulty label
        temps_preparation_min: preparation time in minutes (0 when unknown)
        categorie_temps: time-category label
        nb_personnes: serving count (0 when unknown)
        nom: recipe name, never empty
        description_courte: short description
        ingredients: ';'-separated ingredients with quantities
        instructions: ';'-separated steps
        equipements: ';'-separated equipment
        calories: calories per serving, None when not provided
        image_url: image link, may be ""
    """
    id: str
    type: str
    difficulte: str
    temps_preparation_min: int | float
    categorie_temps: str
    nb_personnes: int | float
    nom: str
    description_courte: str
    ingredients: str
    instructions: str
    equipements: str
    calories: int | float | None = None
    image_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for JSON output; ``calories`` is omitted when absent."""
        data = asdict(self)
        if data["calories"] is None:
            del data["calories"]
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)
