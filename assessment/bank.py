# assessment/bank.py
from assessment.models import Question, QuestionType, Section, WiscarDimension
from questions.psychometric_questions import PSYCHOMETRIC_QUESTIONS
from questions.technical_questions import TECHNICAL_QUESTIONS
from questions.wiscar_questions import WISCAR_QUESTIONS


def _psychometric(raw):
    return Question(
        number=raw['number'],
        text=raw['question'],
        category=Section.PSYCHOLOGICAL.slug,
        topic=raw['topic'],
        type=QuestionType(raw.get('type', 'likert')),
    )


def _technical(raw):
    return Question(
        number=raw['number'],
        text=raw['question'],
        category=Section.TECHNICAL.slug,
        topic=raw['topic'],
        type=QuestionType.CHOICE,
        options=tuple(raw['options']),
        correct_index=raw['correct'],
    )


def _wiscar(raw):
    dimension = WiscarDimension(raw['dimension'])
    return Question(
        number=raw['number'],
        text=raw['question'],
        category=dimension.value,
        topic=raw['topic'],
    )


def load_question_bank():
    """Build the immutable questions for every answerable section."""
    return {
        Section.PSYCHOLOGICAL: tuple(_psychometric(q) for q in PSYCHOMETRIC_QUESTIONS),
        Section.TECHNICAL: tuple(_technical(q) for q in TECHNICAL_QUESTIONS),
        Section.WISCAR: tuple(_wiscar(q) for q in WISCAR_QUESTIONS),
    }


QUESTION_BANK = load_question_bank()
