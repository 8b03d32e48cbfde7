import streamlit as st
from shared import get_unique_grapes
from ui_utils import grape_table_html, inject_css

def view_grapes(printable=False):
    st.markdown('# :material/nutrition: Grape varieties', unsafe_allow_html=True)
    grapes = get_unique_grapes()
    if not grapes:
        st.info("No grapes found.")
        return
    inject_css()
    st.markdown(grape_table_html(grapes, printable=printable), unsafe_allow_html=True)
