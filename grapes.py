"""
Grape dataset handling: loading, normalization and the derived views.

The dataset is a JSON array of flat rows, one per (grape, region) pairing.
Categorical fields are comma separated, free-text list fields are semicolon
separated.
"""
import json
import logging

import pandas as pd

from models import Grape

logger = logging.getLogger(__name__)

CATEGORICAL_FIELDS = ["climate", "acidity", "tannins", "sweetness", "body"]
LIST_FIELDS = ["flavour", "aging", "additional_characteristics"]


class DatasetError(Exception):
    """Raised when the grape dataset cannot be read or a row is unusable."""


def split_categorical(text):
    return _split(text, ",")


def split_list(text):
    return _split(text, ";")


def join_categorical(values):
    return ",".join(values)


def _split(text, delimiter):
    if not text:
        return ()
    tokens = (t.strip() for t in str(text).split(delimiter))
    return tuple(t for t in tokens if t)


def normalize_grape(raw):
    """Build a Grape from a raw dataset row."""
    try:
        order = int(raw["order"])
    except (KeyError, TypeError, ValueError):
        raise DatasetError(f"Row has no usable order: {raw!r}")

    name = str(raw.get("name") or "").strip()
    if not name:
        raise DatasetError(f"Row {order} has no name")

    values = {f: split_categorical(raw.get(f)) for f in CATEGORICAL_FIELDS}
    values.update({f: split_list(raw.get(f)) for f in LIST_FIELDS})

    return Grape(
        order=order,
        name=" / ".join(p.strip() for p in name.split("/")),
        oak=str(raw.get("oak") or "").strip(),
        country=raw.get("country") or "",
        region=raw.get("region") or "",
        regional_characteristics=raw.get("characteristics") or "",
        **values,
    )


def normalize_grapes(raws):
    return [normalize_grape(r) for r in raws]


def load_raw(path):
    """Read the dataset file and return the list of raw rows."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise DatasetError(f"Cannot read dataset {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Dataset {path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise DatasetError(f"Dataset {path} must contain a JSON array")
    return data


def load_grapes(path):
    grapes = normalize_grapes(load_raw(path))
    logger.info("Loaded %d grape rows from %s", len(grapes), path)
    return grapes


# --- VIEW BUILDING ---

def _frame(grapes):
    return pd.DataFrame({
        "grape": list(grapes),
        "name": [g.name for g in grapes],
        "order": [g.order for g in grapes],
        "country": [g.country for g in grapes],
        "region": [g.region for g in grapes],
        "region_key": [g.region_key for g in grapes],
    })


def unique_grapes(grapes):
    """One row per grape name (first seen wins), ordered by display order."""
    if not grapes:
        return []
    df = _frame(grapes).drop_duplicates("name", keep="first")
    return df.sort_values("order", kind="mergesort")["grape"].tolist()


def grapes_by_name(grapes):
    """Map grape name -> its rows, each list sorted by country + region."""
    if not grapes:
        return {}
    df = _frame(grapes).sort_values("region_key", kind="mergesort")
    return {name: group["grape"].tolist() for name, group in df.groupby("name", sort=False)}


def regions_with_grapes(grapes):
    """List of ((country, region), rows) ordered by country + region, rows by grape name."""
    if not grapes:
        return []
    df = _frame(grapes).sort_values(["region_key", "name"], kind="mergesort")
    return [
        (key, group["grape"].tolist())
        for key, group in df.groupby(["country", "region"], sort=False)
    ]


def grape_region_frame(grapes):
    """Rows of the "by grape" table. `Span` is the rowspan of the grape cell (0 = covered)."""
    by_name = grapes_by_name(grapes)
    rows = []
    for grape in unique_grapes(grapes):
        sub = by_name[grape.name]
        for idx, g in enumerate(sub):
            rows.append({
                "Grape": g.name,
                "Country": g.country,
                "Region": g.region,
                "Characteristics": g.regional_characteristics,
                "Span": len(sub) if idx == 0 else 0,
            })
    return pd.DataFrame(rows, columns=["Grape", "Country", "Region", "Characteristics", "Span"])


def region_grape_frame(grapes):
    """Rows of the "by region" table. `Span` is the rowspan of the country/region cells."""
    rows = []
    for (country, region), sub in regions_with_grapes(grapes):
        for idx, g in enumerate(sub):
            rows.append({
                "Country": country,
                "Region": region,
                "Grape": g.name,
                "Characteristics": g.regional_characteristics,
                "Span": len(sub) if idx == 0 else 0,
            })
    return pd.DataFrame(rows, columns=["Country", "Region", "Grape", "Characteristics", "Span"])
