import streamlit as st
from grapes import grape_region_frame, region_grape_frame
from shared import get_grapes
from ui_utils import span_table_html, inject_css

def view_regions(printable=False):
    st.markdown('# :material/public: Grapes and regions', unsafe_allow_html=True)
    grapes = get_grapes()
    if not grapes:
        st.info("No grapes found.")
        return
    inject_css()

    by_grape = grape_region_frame(grapes)
    by_region = region_grape_frame(grapes)

    if printable:
        render_by_grape(by_grape, printable)
        render_by_region(by_region, printable)
        return

    t1, t2 = st.tabs(["By grape", "By region"])
    with t1:
        render_by_grape(by_grape, printable)
    with t2:
        render_by_region(by_region, printable)

def render_by_grape(df, printable):
    st.markdown("## By grape")
    st.markdown(span_table_html(df, span_cols=["Grape"], bold_col="Grape", printable=printable), unsafe_allow_html=True)

def render_by_region(df, printable):
    st.markdown("## By region")
    st.markdown(span_table_html(df, span_cols=["Country", "Region"], bold_col="Grape", printable=printable), unsafe_allow_html=True)
