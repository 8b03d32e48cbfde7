import sys
import os
import streamlit as st

# Ensure this directory is in sys.path for local imports
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
if CURRENT_DIR not in sys.path:
    sys.path.insert(0, CURRENT_DIR)

from models import Grape
from grapes import DatasetError, load_grapes, unique_grapes

__all__ = [
    "Grape", "DatasetError", "get_grapes", "get_unique_grapes",
    "DATA_DIR", "GRAPES_DATA", "LOG_LEVEL", "ISSUES_URL", "AUTHOR_URL",
    "ALCOHOL_LEVELS", "FORTIFIED_ALCOHOL_LEVELS", "CLIMATE_TEMPERATURES",
    "FERMENTATION_TEMPERATURES", "SERVING_TEMPERATURES",
]

# --- CONFIG ---
DATA_DIR = os.path.join(CURRENT_DIR, "data")
GRAPES_DATA = os.getenv("GRAPES_DATA", os.path.join(DATA_DIR, "grapes.json"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

ISSUES_URL = os.getenv("ISSUES_URL", "https://github.com/luksow/wset/issues")
AUTHOR_URL = os.getenv("AUTHOR_URL", "https://luksow.com")

# --- CACHED DATA ---
@st.cache_data
def get_grapes(path=GRAPES_DATA):
    """All dataset rows, normalized. Read once per path."""
    return load_grapes(path)

def get_unique_grapes(path=GRAPES_DATA):
    return unique_grapes(get_grapes(path))

# --- REFERENCE NUMBERS ---
ALCOHOL_LEVELS = [
    ("Low", "below 11%"),
    ("Medium", "11% - 13.9%"),
    ("High", "14%+"),
]

FORTIFIED_ALCOHOL_LEVELS = [
    ("Low", "15% - 16.4%"),
    ("Medium", "16.5% - 18.4%"),
    ("High", "18.5%+"),
]

# Average growing season temperature
CLIMATE_TEMPERATURES = [
    ("Cool", "16.5°C or below"),
    ("Moderate", "16.5°C - 18.5°C"),
    ("Warm", "18.5°C - 21°C"),
]

FERMENTATION_TEMPERATURES = [
    ("White or rosé wines", "12°C - 22°C"),
    ("Red wines", "20°C - 32°C"),
]

# (name, temperature, style of wine)
SERVING_TEMPERATURES = [
    ("Well chilled", "6°C - 8°C", "Sweet wine"),
    ("Well chilled", "6°C - 10°C", "Sparkling wine"),
    ("Chilled", "7°C - 10°C", "Light-, medium-bodied white or rosé"),
    ("Lightly chilled", "10°C - 13°C", "Full-bodied white"),
    ("Room temperature or lightly chilled", "13°C - 18°C", "Light-bodied red"),
    ("Room temperature", "15°C - 18°C", "Medium-, full-bodied red"),
]
