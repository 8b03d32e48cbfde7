import html
import logging
import streamlit as st
import pandas as pd
from constants import BADGE_COLORS, COLOR_HEX, FALLBACK_COLOR

logger = logging.getLogger(__name__)

TABLE_CSS = """
<style>
.grape-scroll { max-height: 85vh; overflow: auto; margin-bottom: 1rem; border: 1px solid rgba(128,128,128,0.2); }
.grape-scroll thead th { position: sticky; top: 0; background: var(--background-color, white); z-index: 1; }
table.grape-table { border-collapse: collapse; width: 100%; font-size: 0.8rem; }
table.grape-table th, table.grape-table td { border: 1px solid rgba(128,128,128,0.3); padding: 4px 6px; vertical-align: top; text-align: left; }
table.grape-table tbody tr:nth-child(even) { background-color: rgba(128,128,128,0.06); }
table.grape-table ul { padding-left: 16px; margin: 0; }
.badge-col { display: flex; flex-direction: column; gap: 3px; }
.badge { display: inline-block; padding: 1px 8px; border-radius: 10px; font-size: 0.7rem; font-weight: 700; text-transform: uppercase; text-align: center; }
</style>
"""


def render_table(df, config=None, cols=None):
    # Plain reference tables (no badges)
    cols = cols or list(df.columns)
    n_rows = len(df)
    height = min((n_rows + 1) * 35 + 3, 2000)
    st.dataframe(df, column_config=config or {}, hide_index=True, column_order=cols, height=height)


def is_printable():
    return "printable" in st.query_params


def navigate_to(page_name):
    st.session_state["page"] = page_name
    st.query_params.clear()
    st.query_params["page"] = page_name
    st.rerun()


def inject_css():
    st.markdown(TABLE_CSS, unsafe_allow_html=True)


# --- BADGES & LISTS ---

def badge_color(field, value):
    color = BADGE_COLORS.get(field, {}).get(value)
    if color is None:
        logger.debug("No badge colour for %s=%r", field, value)
        return FALLBACK_COLOR
    return color


def badge_html(label, color):
    bg, fg = COLOR_HEX.get(color, COLOR_HEX[FALLBACK_COLOR])
    return f"<span class='badge' style='background-color: {bg}; color: {fg};'>{html.escape(label)}</span>"


def badges_html(field, values):
    if not values and field == "tannins":
        return badge_html("N/A", FALLBACK_COLOR)
    return "".join(badge_html(v, badge_color(field, v)) for v in values)


def list_html(items):
    return "<ul>" + "".join(f"<li>{html.escape(i)}</li>" for i in items) + "</ul>"


def value_html(field, value):
    """HTML for any grape attribute: badges, bullet list or plain text."""
    if field in BADGE_COLORS:
        return f"<div class='badge-col'>{badges_html(field, value)}</div>"
    if isinstance(value, (tuple, list)):
        return list_html(value)
    return html.escape(str(value))


# --- TABLES ---

GRAPE_COLUMNS = [
    ("Grape", "name"), ("Climate", "climate"), ("Acidity", "acidity"),
    ("Tannins", "tannins"), ("Sweetness", "sweetness"), ("Body", "body"),
    ("Flavour", "flavour"), ("Oak", "oak"),
    ("Characteristics", "additional_characteristics"), ("Aging", "aging"),
]


def _wrap(table, printable):
    if printable:
        return table
    return f"<div class='grape-scroll'>{table}</div>"


def _head(headers):
    return "<thead><tr>" + "".join(f"<th>{h}</th>" for h in headers) + "</tr></thead>"


def grape_table_html(grapes, printable=False):
    rows = []
    for g in grapes:
        cells = [f"<td><b>{html.escape(g.name)}</b></td>"]
        cells += [f"<td>{value_html(field, getattr(g, field))}</td>" for _, field in GRAPE_COLUMNS[1:]]
        rows.append("<tr>" + "".join(cells) + "</tr>")
    table = (
        "<table class='grape-table'>" + _head([h for h, _ in GRAPE_COLUMNS])
        + "<tbody>" + "".join(rows) + "</tbody></table>"
    )
    return _wrap(table, printable)


def span_table_html(df, span_cols, bold_col, printable=False):
    """
    Render a frame with a `Span` column as an HTML table.

    Cells of `span_cols` are emitted only on rows with Span > 0, using it as
    the rowspan, so grouped rows share one cell.
    """
    headers = [c for c in df.columns if c != "Span"]
    rows = []
    for _, row in df.iterrows():
        cells = []
        for col in headers:
            text = html.escape(str(row[col]) if pd.notnull(row[col]) else "")
            if col == bold_col:
                text = f"<b>{text}</b>"
            if col in span_cols:
                if row["Span"] == 0:
                    continue
                cells.append(f"<td rowspan='{int(row['Span'])}'>{text}</td>")
            else:
                cells.append(f"<td>{text}</td>")
        rows.append("<tr>" + "".join(cells) + "</tr>")
    table = "<table class='grape-table'>" + _head(headers) + "<tbody>" + "".join(rows) + "</tbody></table>"
    return _wrap(table, printable)
