"""
Grape trivia quiz.

A quiz question picks a random grape and a random attribute category and
asks for the grape's value in that category. Draws are repeated until the
category has a value for the grape.
"""
import logging
import random
from enum import Enum

logger = logging.getLogger(__name__)

MAX_DRAWS = 100

# category -> display name used in the question
QUIZ_CATEGORIES = {
    "climate": "climate",
    "acidity": "acidity",
    "tannins": "tannins",
    "sweetness": "sweetness",
    "body": "body",
    "flavour": "flavour",
    "oak": "oak usage",
    "aging": "aging flavor/characteristic",
    "additional_characteristics": "additional characteristic",
}


class QuizState(str, Enum):
    IDLE = "idle"
    QUESTION_SHOWN = "question-shown"
    ANSWER_SHOWN = "answer-shown"


class QuizError(Exception):
    """Raised on an invalid quiz transition or when no question can be asked."""


class GrapeQuiz:
    def __init__(self, grapes, rng=None):
        self.grapes = list(grapes)
        self.rng = rng or random.Random()
        self.state = QuizState.IDLE
        self.grape = None
        self.category = None

    @property
    def answer(self):
        if self.grape is None:
            return None
        return getattr(self.grape, self.category)

    @property
    def question_text(self):
        if self.grape is None:
            return "Start quiz"
        return f"What is the {QUIZ_CATEGORIES[self.category]} of {self.grape.name}?"

    def draw(self):
        """Return a (grape, category) pair whose value is non-empty."""
        if not self.grapes:
            raise QuizError("No grapes to ask about")
        categories = list(QUIZ_CATEGORIES)

        for attempt in range(MAX_DRAWS):
            grape = self.rng.choice(self.grapes)
            category = self.rng.choice(categories)
            if getattr(grape, category):
                return grape, category
            logger.debug("Empty %s for %s, drawing again (%d)", category, grape.name, attempt + 1)

        # Unlucky or sparse data: choose among the answerable pairs directly
        pairs = [(g, c) for g in self.grapes for c in categories if getattr(g, c)]
        if not pairs:
            raise QuizError("No grape has a value in any quiz category")
        return self.rng.choice(pairs)

    def new_question(self):
        if self.state == QuizState.QUESTION_SHOWN:
            raise QuizError("Answer the current question first")
        self.grape, self.category = self.draw()
        self.state = QuizState.QUESTION_SHOWN

    def show_answer(self):
        if self.state != QuizState.QUESTION_SHOWN:
            raise QuizError(f"No question to answer (state: {self.state.value})")
        self.state = QuizState.ANSWER_SHOWN
