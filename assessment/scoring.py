# assessment/scoring.py
import math
from fractions import Fraction

from assessment.models import LIKERT_MAX, LIKERT_MIN, QuestionType

LIKERT_STEP = 25  # (5 - 1) * 25 == 100


def round_half_up(value):
    """Round to the nearest integer with .5 going up, the way the percentages are displayed."""
    return math.floor(Fraction(value) + Fraction(1, 2))


def normalize_likert(rating):
    """Convert a rating in [1, 5] (or an exact mean of ratings) into a 0-100 percentage."""
    if not LIKERT_MIN <= rating <= LIKERT_MAX:
        raise ValueError(f"Likert rating out of range: {rating!r}")
    return round_half_up((Fraction(rating) - LIKERT_MIN) * LIKERT_STEP)


def score_likert(ratings):
    """
    Score a Likert category.
    Averages the raw ratings exactly and normalizes once, so rounding happens a single time.
    """
    ratings = list(ratings)
    if not ratings:
        raise ValueError("Cannot score a category with no answers")
    mean = Fraction(sum(ratings), len(ratings))
    return normalize_likert(mean)


def score_choice(correctness):
    """Percentage of correct answers in a multiple-choice category."""
    correctness = list(correctness)
    if not correctness:
        raise ValueError("Cannot score a category with no answers")
    correct = sum(1 for is_correct in correctness if is_correct)
    return round_half_up(Fraction(100 * correct, len(correctness)))


def score_answers(questions, answers):
    """
    Score committed answers per category.
    Answers are matched to questions by position; categories are returned in the
    order they first appear, each scored only from its own answers.
    """
    if len(answers) > len(questions):
        raise ValueError("More answers than questions")

    grouped = {}
    for question, answer in zip(questions, answers):
        grouped.setdefault(question.category, []).append((question, answer))

    scores = {}
    for category, pairs in grouped.items():
        types = {q.type for q, _ in pairs}
        if len(types) != 1:
            raise ValueError(f"Category '{category}' mixes question types")

        if types.pop() is QuestionType.LIKERT:
            scores[category] = score_likert(answer for _, answer in pairs)
        else:
            scores[category] = score_choice(q.is_correct(answer) for q, answer in pairs)
    return scores
