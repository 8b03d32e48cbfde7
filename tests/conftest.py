"""Shared fixtures for the GrapeSheet tests."""

import os
import random

import pytest

from grapes import normalize_grapes

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_PATH = os.path.join(ROOT_DIR, "data", "grapes.json")


def make_raw(order, name, **fields):
    raw = {
        "order": order,
        "name": name,
        "climate": "",
        "acidity": "",
        "tannins": "",
        "sweetness": "",
        "body": "",
        "flavour": "",
        "oak": "",
        "additional_characteristics": "",
        "aging": "",
    }
    raw.update(fields)
    return raw


@pytest.fixture
def data_path():
    return DATA_PATH


@pytest.fixture(name="make_raw")
def make_raw_fixture():
    """Factory for raw dataset rows with every text field present."""
    return make_raw


@pytest.fixture
def raw_rows():
    """A small dataset: two grapes in several regions, one grape in one region."""
    pinot = dict(
        climate="Cool, Moderate", acidity="High", tannins="Low", sweetness="Dry",
        body="Light, Medium", flavour="Strawberry; raspberry", oak="Sometimes",
        aging="Mushroom; forest floor",
    )
    riesling = dict(
        climate="Cool,Moderate", acidity="High", sweetness="Dry, Off-dry, Medium, Sweet",
        body="Light, Medium", flavour="Lime; peach; ", oak="No", aging="Petrol",
    )
    return [
        make_raw(3, "Riesling", country="Germany", region="Mosel", characteristics="Off-dry", **riesling),
        make_raw(1, "Pinot Noir", country="New Zealand", region="Marlborough", **pinot),
        make_raw(2, "Pinot Noir", country="France", region="Côte d'Or", characteristics="Earthy", **pinot),
        make_raw(4, "Riesling", country="France", region="Alsace", characteristics="Dry", **riesling),
        make_raw(5, "Syrah/Shiraz", country="France", region="Northern Rhône", climate="Moderate",
                 tannins="Medium, High", flavour="Black pepper"),
    ]


@pytest.fixture
def grapes(raw_rows):
    return normalize_grapes(raw_rows)


@pytest.fixture
def rng():
    return random.Random(1234)
