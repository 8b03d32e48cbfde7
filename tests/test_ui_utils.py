"""Tests for badge and table HTML rendering."""

import pandas as pd

from constants import FALLBACK_COLOR
from ui_utils import (
    badge_color,
    badges_html,
    grape_table_html,
    list_html,
    span_table_html,
    value_html,
)


class TestBadges:
    """Test colour lookup and badge markup."""

    def test_known_colors(self):
        assert badge_color("climate", "Cool") == "blue"
        assert badge_color("climate", "Warm") == "red"
        assert badge_color("acidity", "Low") == "lime"
        assert badge_color("body", "Medium") == "teal"
        assert badge_color("sweetness", "Off-dry") == "lime"

    def test_unknown_label_falls_back(self):
        assert badge_color("climate", "Tropical") == FALLBACK_COLOR
        assert badge_color("colour", "Red") == FALLBACK_COLOR

    def test_empty_tannins_render_na(self):
        assert ">N/A<" in badges_html("tannins", ())
        assert badges_html("climate", ()) == ""

    def test_one_badge_per_label(self):
        out = badges_html("sweetness", ("Dry", "Sweet"))
        assert out.count("class='badge'") == 2
        assert ">Dry<" in out and ">Sweet<" in out

    def test_labels_are_escaped(self):
        assert "&lt;b&gt;" in badges_html("climate", ("<b>",))


class TestValues:
    """Test rendering of any grape attribute."""

    def test_list_html(self):
        assert list_html(("Lemon", "Lime")) == "<ul><li>Lemon</li><li>Lime</li></ul>"

    def test_value_html_dispatch(self):
        assert "badge-col" in value_html("climate", ("Cool",))
        assert value_html("flavour", ("Lemon",)) == "<ul><li>Lemon</li></ul>"
        assert value_html("oak", "Often") == "Often"


class TestTables:
    """Test the HTML tables."""

    def test_grape_table_rows(self, grapes):
        out = grape_table_html(grapes)
        assert out.startswith("<div class='grape-scroll'>")
        assert out.count("<tr>") == len(grapes) + 1
        assert "<th>Characteristics</th>" in out

    def test_printable_table_is_not_scrollable(self, grapes):
        out = grape_table_html(grapes, printable=True)
        assert out.startswith("<table")

    def test_span_table(self):
        df = pd.DataFrame([
            {"Grape": "Riesling", "Country": "France", "Region": "Alsace", "Characteristics": "Dry", "Span": 2},
            {"Grape": "Riesling", "Country": "Germany", "Region": "Mosel", "Characteristics": "", "Span": 0},
        ])
        out = span_table_html(df, span_cols=["Grape"], bold_col="Grape", printable=True)
        assert out.count("<td rowspan='2'><b>Riesling</b></td>") == 1
        assert "Riesling" not in out.split("</tr>")[2]
        assert "<th>Span</th>" not in out
