import os

import pytest

os.environ.setdefault('FLASK_ENV', 'testing')

from app import app as flask_app  # noqa: E402
from assessment.bank import QUESTION_BANK  # noqa: E402
from assessment.models import Section  # noqa: E402
from assessment.orchestrator import AssessmentOrchestrator  # noqa: E402


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True, SECRET_KEY='testing-secret-key')
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def orchestrator():
    return AssessmentOrchestrator()


def answer_section(orchestrator, section, value_for):
    """Submit value_for(question) for every question of a section, in order."""
    completed = False
    for question in QUESTION_BANK[section]:
        completed = orchestrator.submit_answer(section, question.number, value_for(question))
    return completed


def run_assessment(orchestrator, likert, technical_correct):
    orchestrator.start()
    answer_section(orchestrator, Section.PSYCHOLOGICAL, lambda q: likert)
    answer_section(orchestrator, Section.TECHNICAL,
                   lambda q: q.correct_index if technical_correct else (q.correct_index + 1) % len(q.options))
    answer_section(orchestrator, Section.WISCAR, lambda q: likert)
    return orchestrator
