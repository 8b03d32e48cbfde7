import streamlit as st
from shared import ISSUES_URL, AUTHOR_URL

def view_about(printable=False):
    if not printable:
        st.markdown('# :material/print: Need printable version?', unsafe_allow_html=True)
        st.markdown(
            "Try [this](/?printable=1) and then use the print function of your browser "
            "(works best in landscape mode)."
        )

    st.markdown('# :material/bug_report: Error? Missing information?', unsafe_allow_html=True)
    st.markdown(f"You can report any issues [here]({ISSUES_URL}) or [directly to me]({AUTHOR_URL}).")

    st.markdown('# :material/menu_book: Acknowledgments', unsafe_allow_html=True)
    st.markdown(
        "Prepared based on *Wines: Looking behind the label* and "
        "*WSET® Level 2 Award in Wines Workbook* by WSET."
    )
