import streamlit as st
from quiz import GrapeQuiz, QuizError, QuizState
from shared import get_unique_grapes
from ui_utils import value_html, inject_css

def get_quiz():
    """The session's quiz, created on first use."""
    if "quiz" not in st.session_state:
        st.session_state["quiz"] = GrapeQuiz(get_unique_grapes())
    return st.session_state["quiz"]

def on_new_question():
    try:
        get_quiz().new_question()
    except QuizError as e:
        st.session_state["quiz_error"] = str(e)

def on_show_answer():
    get_quiz().show_answer()

def view_quiz():
    st.markdown('# :material/quiz: Grapes Quiz', unsafe_allow_html=True)
    quiz = get_quiz()
    if not quiz.grapes:
        st.info("No grapes found.")
        return
    inject_css()

    error = st.session_state.pop("quiz_error", None)
    if error:
        st.warning(error)

    with st.container(border=True):
        st.markdown(f"### {quiz.question_text}")

        if quiz.state == QuizState.ANSWER_SHOWN:
            st.markdown(value_html(quiz.category, quiz.answer), unsafe_allow_html=True)

        if quiz.state in (QuizState.IDLE, QuizState.ANSWER_SHOWN):
            st.button("New question", key="quiz_new", type="primary", on_click=on_new_question)
        else:
            st.button("Show answer", key="quiz_answer", on_click=on_show_answer)
