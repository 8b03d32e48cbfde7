#!/usr/bin/env python3
"""
Check the GrapeSheet dataset.

Loads the grape JSON and reports rows that the app would render badly:
labels outside the fixed vocabularies, rows that cannot be normalized, and
grapes whose attributes differ between their region rows.

Usage:
    python check_data.py                  # Check the configured dataset
    python check_data.py path/to/file.json
"""
import os
import sys
import argparse

# Ensure this directory is in sys.path
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
if CURRENT_DIR not in sys.path:
    sys.path.insert(0, CURRENT_DIR)

from constants import VOCABULARIES
from grapes import CATEGORICAL_FIELDS, LIST_FIELDS, DatasetError, load_raw, normalize_grape

# --- Config ---
GRAPES_DATA = os.getenv("GRAPES_DATA", os.path.join(CURRENT_DIR, "data", "grapes.json"))

# Attributes that belong to the grape, not to the region row
GRAPE_FIELDS = CATEGORICAL_FIELDS + LIST_FIELDS + ["oak"]


def find_problems(raws):
    """Return a list of human readable problems found in the raw rows."""
    problems = []
    first_seen = {}

    for idx, raw in enumerate(raws):
        try:
            grape = normalize_grape(raw)
        except DatasetError as e:
            problems.append(f"row {idx}: {e}")
            continue

        for field, vocab in VOCABULARIES.items():
            allowed = {v.value for v in vocab}
            for label in getattr(grape, field):
                if label not in allowed:
                    problems.append(f"row {idx} ({grape.name}): unknown {field} '{label}'")

        prev = first_seen.setdefault(grape.name, grape)
        if prev is not grape:
            for field in GRAPE_FIELDS:
                if getattr(prev, field) != getattr(grape, field):
                    problems.append(
                        f"row {idx} ({grape.name}): {field} differs from row with order {prev.order}"
                    )

    return problems


def check_data(path):
    """Check one dataset file. Returns True when no problem was found."""
    print(f"[*] Checking dataset: {path}")
    try:
        raws = load_raw(path)
    except DatasetError as e:
        print(f"[ERROR] {e}")
        return False

    problems = find_problems(raws)
    for p in problems:
        print(f"  [WARN] {p}")

    if problems:
        print(f"[ERROR] {len(problems)} problem(s) in {len(raws)} rows.")
        return False
    print(f"[OK] {len(raws)} rows checked, no problems found.")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Check the GrapeSheet dataset")
    parser.add_argument("path", nargs="?", default=GRAPES_DATA, help="Dataset JSON file")
    args = parser.parse_args()

    sys.exit(0 if check_data(args.path) else 1)
