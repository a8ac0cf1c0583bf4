# assessment/sequencer.py
import logging
from enum import Enum

from assessment.errors import (
    AnswerRequiredError,
    InvalidAnswerError,
    SectionCompleteError,
    SectionIncompleteError,
)
from assessment.scoring import round_half_up, score_answers

logger = logging.getLogger(__name__)


class SequencerState(str, Enum):
    AWAITING_ANSWER = "awaiting_answer"
    ADVANCING = "advancing"
    SECTION_COMPLETE = "section_complete"


class SectionSequencer:
    """
    Walks one section's questions in order.

    A selection lands in the pending slot and can be overwritten freely; advance()
    commits it to the append-only answer list. When the last answer is committed
    every category in the section is scored from its own answers.
    """

    def __init__(self, section, questions):
        if not questions:
            raise ValueError(f"Section '{section}' has no questions")
        self.section = section
        self.questions = tuple(questions)
        self.pending = None
        self._answers = []
        self._scores = None
        self._state = SequencerState.AWAITING_ANSWER

    @property
    def state(self):
        return self._state

    @property
    def answers(self):
        return tuple(self._answers)

    @property
    def is_complete(self):
        return self._state is SequencerState.SECTION_COMPLETE

    @property
    def current_index(self):
        return len(self._answers)

    @property
    def current_question(self):
        if self.is_complete:
            return None
        return self.questions[self.current_index]

    @property
    def progress(self):
        """(answered, total) for this section."""
        return len(self._answers), len(self.questions)

    @property
    def percent_complete(self):
        if self.is_complete:
            return 100
        return round_half_up((self.current_index + 1) * 100 / len(self.questions))

    @property
    def scores(self):
        if not self.is_complete:
            raise SectionIncompleteError(self.section)
        return dict(self._scores)

    def select(self, value):
        if self.is_complete:
            raise SectionCompleteError(self.section)
        question = self.current_question
        if not question.accepts(value):
            raise InvalidAnswerError(question.number, value)
        self.pending = value

    def advance(self):
        """Commit the pending answer. Returns True when this completed the section."""
        if self.is_complete:
            raise SectionCompleteError(self.section)
        if self.pending is None:
            logger.warning(f"Rejected advance without an answer in '{self.section}' "
                           f"(question {self.current_question.number})")
            raise AnswerRequiredError(self.current_question.number)

        self._state = SequencerState.ADVANCING
        self._answers.append(self.pending)
        self.pending = None

        if len(self._answers) < len(self.questions):
            self._state = SequencerState.AWAITING_ANSWER
            return False

        self._scores = score_answers(self.questions, self._answers)
        self._state = SequencerState.SECTION_COMPLETE
        logger.info(f"Section '{self.section}' complete: {self._scores}")
        return True

    def submit(self, value):
        self.select(value)
        return self.advance()
