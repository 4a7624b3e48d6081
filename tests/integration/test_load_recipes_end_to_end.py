from __future__ import annotations

from pathlib import Path

import pytest

from conftest import FULL_HEADER, FakeSession, make_response
from recipe_sheet import fetch_recipes_from_sheet, load_source_config
from recipe_sheet.config.loader import ENV_VAR


def test_env_to_recipes(monkeypatch, sheet_url, full_csv_text):
    monkeypatch.setenv(ENV_VAR, sheet_url)
    session = FakeSession(make_response(200, full_csv_text))
    recipes = fetch_recipes_from_sheet(session=session)

    assert len(session.calls) == 1
    assert [r.nom for r in recipes] == ["Tarte aux pommes", "Quiche lorraine", "Crêpes"]
    assert all(r.nom.strip() for r in recipes)
    assert all(r.id for r in recipes)


def test_yaml_column_overrides(write_config, sheet_url):
    path = write_config("columns:\n  nom: Titre\n  type: Catégorie\nid_column: Code\n")
    cfg = load_source_config(env={ENV_VAR: sheet_url}, config_path=path)
    csv_text = "Code,Titre,Catégorie\n,Flan,sucré\nC-9,Gratin,salé\n,,sucré\n"
    recipes = fetch_recipes_from_sheet(cfg, session=FakeSession(make_response(200, csv_text)))
    assert [(r.id, r.nom, r.type) for r in recipes] == [("R_1", "Flan", "sucré"), ("C-9", "Gratin", "salé")]


@pytest.mark.parametrize("dropped", [0, 1, 3])
def test_output_length_matches_named_rows(sheet_url, dropped):
    lines = [FULL_HEADER]
    for i in range(5):
        name = "" if i < dropped else f"Recette {i}"
        lines.append(f",sucré,Facile,10,Rapide,2,{name},,,,,,")
    session = FakeSession(make_response(200, "\n".join(lines) + "\n"))
    recipes = fetch_recipes_from_sheet(load_source_config(env={ENV_VAR: sheet_url}), session=session)
    assert len(recipes) == 5 - dropped
    assert [r.id for r in recipes] == [f"R_{i + 1}" for i in range(dropped, 5)]


def test_minimal_sheet_degrades_to_defaults(sheet_url):
    csv_text = "Nom de la recette,Type (sucré/salé),Autre\nTarte,sucré,x\n"
    recipes = fetch_recipes_from_sheet(
        load_source_config(env={ENV_VAR: sheet_url}),
        session=FakeSession(make_response(200, csv_text)),
    )
    recipe = recipes[0]
    assert recipe.difficulte == ""
    assert recipe.temps_preparation_min == 0
    assert recipe.nb_personnes == 0
    assert recipe.calories is None
    assert recipe.image_url == ""
