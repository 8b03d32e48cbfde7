import streamlit as st
import pandas as pd
from shared import (
    ALCOHOL_LEVELS, FORTIFIED_ALCOHOL_LEVELS, CLIMATE_TEMPERATURES,
    FERMENTATION_TEMPERATURES, SERVING_TEMPERATURES
)
from ui_utils import render_table

def view_numbers(printable=False):
    st.markdown('# :material/thermostat: Important numbers', unsafe_allow_html=True)

    st.subheader("Alcohol")
    c1, c2 = st.columns(2)
    with c1:
        st.caption("Still wines")
        render_table(pd.DataFrame(ALCOHOL_LEVELS, columns=["Level", "ABV"]))
    with c2:
        st.caption("Fortified wines")
        render_table(pd.DataFrame(FORTIFIED_ALCOHOL_LEVELS, columns=["Level", "ABV"]))

    st.subheader("Climate")
    st.caption("Average growing season temperature")
    render_table(pd.DataFrame(CLIMATE_TEMPERATURES, columns=["Climate", "Temperature"]))

    st.subheader("Fermentation")
    render_table(pd.DataFrame(FERMENTATION_TEMPERATURES, columns=["Wine", "Temperature"]))

    st.subheader("Serving temperatures")
    render_table(pd.DataFrame(SERVING_TEMPERATURES, columns=["Name", "Temperature", "Style of wine"]))
