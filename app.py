import logging
import streamlit as st

# Import Shared & Utils
from shared import DatasetError, LOG_LEVEL
from ui_utils import is_printable, navigate_to

# Import Modules
from views.grape_table import view_grapes
from views.regions import view_regions
from views.quiz_card import view_quiz
from views.numbers import view_numbers
from views.about import view_about

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# --- PAGE CONFIG ---
st.set_page_config(page_title="GrapeSheet", layout="wide", page_icon="🍇")

# --- ROUTING & STATE ---
NAV_OPTIONS = ["Grapes", "Regions", "Quiz", "Numbers", "About"]

PAGES = {
    "Grapes": view_grapes,
    "Regions": view_regions,
    "Quiz": view_quiz,
    "Numbers": view_numbers,
    "About": view_about,
}

def render_printable():
    # Everything on one page, no scroll containers and no quiz
    view_grapes(printable=True)
    view_regions(printable=True)
    view_numbers(printable=True)
    view_about(printable=True)

def render_interactive():
    if "page" not in st.session_state:
        st.session_state["page"] = "Grapes"

    current_view = st.query_params.get("page", st.session_state["page"])
    if current_view not in NAV_OPTIONS:
        current_view = "Grapes"

    st.sidebar.markdown('# :material/wine_bar: GrapeSheet ', unsafe_allow_html=True)
    selection = st.sidebar.radio("Navigation", NAV_OPTIONS, index=NAV_OPTIONS.index(current_view))

    # Handle sidebar interaction (Change of top-level page)
    if selection != current_view:
        navigate_to(selection)

    st.sidebar.divider()
    if st.sidebar.button("Reload Data"):
        st.cache_data.clear()
        st.session_state.pop("quiz", None)
        st.rerun()

    PAGES[current_view]()

# --- MASTER ROUTING ---
try:
    if is_printable():
        render_printable()
    else:
        render_interactive()
except DatasetError as e:
    logger.error("Cannot load grape dataset: %s", e)
    st.error(f"Cannot load grape dataset: {e}")
