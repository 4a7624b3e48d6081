# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path

import pytest
import requests

from recipe_sheet.logging.init import reset_logging

SHEET_URL = "https://docs.google.com/spreadsheets/d/e/abc/pub?output=csv"

FULL_HEADER = (
    "ID,Type (sucré/salé),Difficulté (Facile/Moyen/Difficile),Temps de préparation (min),"
    "Catégorie temps (sélection),Nombre de personnes,Nom de la recette,Description courte,"
    "Ingrédients + quantités (séparés par ;),Instructions (étapes séparées par ;),"
    "Équipements nécessaires (séparés par ;),Calories (pour une portion),image_url"
)


def make_response(status: int = 200, body: str = "", reason: str = "OK") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp._content = body.encode("utf-8")
    resp.url = SHEET_URL
    return resp


class FakeSession:
    """Stand-in for requests.Session recording every GET."""

    def __init__(self, response: requests.Response | None = None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.calls: list[dict] = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sheet_url() -> str:
    return SHEET_URL


@pytest.fixture()
def full_csv_text() -> str:
    return (
        FULL_HEADER + "\n"
        "R-001,Sucré,Facile,30,Rapide,4,Tarte aux pommes,Une tarte simple,"
        "pommes 4;pâte 1,Étaler;Cuire,four;moule,320,https://img.example/tarte.jpg\n"
        ",Salé,Moyen,45,Moyen,2,Quiche lorraine,Classique,"
        "oeufs 3;lardons 200g,Battre;Cuire,four,,\n"
        "\n"
        ",salé,Difficile,,Long,,  ,Sans nom,,,,,\n"
        ",sucré,Facile,abc,Rapide,x,  Crêpes  ,,farine;lait,Mélanger,poêle,0,\n"
    )


@pytest.fixture()
def write_config(temp_workdir: Path):
    def _write(text: str) -> Path:
        cfg = temp_workdir / "config" / "recipes.yml"
        cfg.write_text(text, encoding="utf-8")
        return cfg
    return _write
