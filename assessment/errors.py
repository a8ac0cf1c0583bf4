# assessment/errors.py


class AssessmentError(Exception):
    """Base class for rejected assessment transitions. The state is left untouched."""


class AnswerRequiredError(AssessmentError):
    def __init__(self, question_number):
        super().__init__(f"Select an answer for question {question_number} before continuing")
        self.question_number = question_number


class InvalidAnswerError(AssessmentError):
    def __init__(self, question_number, value):
        super().__init__(f"{value!r} is not a valid answer for question {question_number}")
        self.question_number = question_number
        self.value = value


class SectionCompleteError(AssessmentError):
    def __init__(self, section):
        super().__init__(f"Section '{section}' is already complete")
        self.section = section


class SectionIncompleteError(AssessmentError):
    def __init__(self, section):
        super().__init__(f"Section '{section}' has not been completed yet")
        self.section = section


class SectionMismatchError(AssessmentError):
    def __init__(self, expected, got):
        super().__init__(f"Section '{got}' is not active (current section is '{expected}')")
        self.expected = expected
        self.got = got


class QuestionMismatchError(AssessmentError):
    def __init__(self, expected, got):
        super().__init__(f"Question {got} is not the current question (expected {expected})")
        self.expected = expected
        self.got = got


class AssessmentIncompleteError(AssessmentError):
    def __init__(self, section):
        super().__init__(f"Results are not available while '{section}' is in progress")
        self.section = section
