from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass

from ..models.recipe import Recipe

"""Sweet/savory tally rendered as the SUMMARY log line.

Matching is loose on purpose: accents and case are folded, then the type
label is searched for "sucr"/"sweet" and "sal"/"savory"/"savoury". A label
can count on both sides. The tally never changes the returned recipes.
"""

SWEET_MARKERS = ("sucr", "sweet")
SAVORY_MARKERS = ("sal", "savory", "savoury")


@dataclass(frozen=True)
class TypeTally:
    total: int
    sweet: int
    savory: int


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold().strip()


def tally_types(recipes: Iterable[Recipe]) -> TypeTally:
    total = sweet = savory = 0
    for recipe in recipes:
        total += 1
        label = _fold(recipe.type or "")
        if any(marker in label for marker in SWEET_MARKERS):
            sweet += 1
        if any(marker in label for marker in SAVORY_MARKERS):
            savory += 1
    return TypeTally(total=total, sweet=sweet, savory=savory)


def render_summary_line(tally: TypeTally) -> str:
    """Render the tally without the SUMMARY label (added by the formatter).

    Examples:
        >>> render_summary_line(TypeTally(total=3, sweet=2, savory=1))
        'recipes=3 sweet=2 savory=1'
    """
    return f"recipes={tally.total} sweet={tally.sweet} savory={tally.savory}"
