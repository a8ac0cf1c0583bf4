# assessment/models.py
from dataclasses import dataclass, field, asdict
from enum import Enum, IntEnum
from typing import Optional, Tuple


# --- Questions -------------------------------------------------------------------
class QuestionType(str, Enum):
    LIKERT = "likert"
    CHOICE = "choice"


LIKERT_MIN = 1
LIKERT_MAX = 5


@dataclass(frozen=True)
class Question:
    """A single immutable question. Choice questions carry their options and the correct index."""
    number: int
    text: str
    category: str
    topic: str
    type: QuestionType = QuestionType.LIKERT
    options: Tuple[str, ...] = ()
    correct_index: Optional[int] = None

    def __post_init__(self):
        if self.type is QuestionType.CHOICE:
            if not self.options:
                raise ValueError(f"Choice question {self.number} has no options")
            if self.correct_index is None or not 0 <= self.correct_index < len(self.options):
                raise ValueError(f"Choice question {self.number} has an invalid correct index")

    def accepts(self, value):
        """True when value is a well-formed answer to this question."""
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if self.type is QuestionType.LIKERT:
            return LIKERT_MIN <= value <= LIKERT_MAX
        return 0 <= value < len(self.options)

    def is_correct(self, index):
        if self.type is not QuestionType.CHOICE:
            raise ValueError(f"Question {self.number} is not a choice question")
        return index == self.correct_index


# --- Sections --------------------------------------------------------------------
class Section(IntEnum):
    INTRO = 0
    PSYCHOLOGICAL = 1
    TECHNICAL = 2
    WISCAR = 3
    RESULTS = 4

    @property
    def slug(self):
        return self.name.lower()

    @property
    def label(self):
        return SECTION_LABELS[self]

    @classmethod
    def from_slug(cls, slug):
        try:
            return cls[str(slug).upper()]
        except KeyError:
            raise ValueError(f"Unknown section: {slug!r}") from None


SECTION_LABELS = {
    Section.INTRO: "Introduction",
    Section.PSYCHOLOGICAL: "Psychological Fit",
    Section.TECHNICAL: "Technical Aptitude",
    Section.WISCAR: "WISCAR Analysis",
    Section.RESULTS: "Your Results",
}


# --- WISCAR ----------------------------------------------------------------------
class WiscarDimension(str, Enum):
    WILL = "will"
    INTEREST = "interest"
    SKILL = "skill"
    COGNITIVE = "cognitive"
    ABILITY = "ability"
    REALITY = "reality"

    @property
    def code(self):
        return self.value[0].upper()

    @property
    def label(self):
        return WISCAR_LABELS[self]


WISCAR_LABELS = {
    WiscarDimension.WILL: "Will (Persistence)",
    WiscarDimension.INTEREST: "Interest (Curiosity)",
    WiscarDimension.SKILL: "Skill (Current Ability)",
    WiscarDimension.COGNITIVE: "Cognitive (Thinking)",
    WiscarDimension.ABILITY: "Ability (Learning)",
    WiscarDimension.REALITY: "Reality (Alignment)",
}


@dataclass(frozen=True)
class WiscarProfile:
    will: int
    interest: int
    skill: int
    cognitive: int
    ability: int
    reality: int

    @classmethod
    def from_scores(cls, scores):
        """Build a profile from a mapping keyed by dimension value; every dimension is required."""
        return cls(**{d.value: scores[d.value] for d in WiscarDimension})

    def items(self):
        return [(d, getattr(self, d.value)) for d in WiscarDimension]

    @property
    def average(self):
        return sum(score for _, score in self.items()) / len(WiscarDimension)

    def as_dict(self):
        return asdict(self)


# --- Recommendation --------------------------------------------------------------
class Tier(str, Enum):
    YES = "Yes"
    MAYBE = "Maybe"
    NO = "No"


@dataclass(frozen=True)
class CareerMatch:
    role: str
    description: str
    match: int


@dataclass(frozen=True)
class LearningStage:
    level: str
    topics: str
    resources: str


@dataclass(frozen=True)
class NextSteps:
    heading: str
    actions: Tuple[str, ...]


@dataclass
class AssessmentState:
    section: Section = Section.INTRO
    progress: int = 0
    psychological: int = 0
    technical: int = 0
    wiscar: Optional[WiscarProfile] = None


@dataclass(frozen=True)
class RecommendationResult:
    psychological: int
    technical: int
    wiscar: WiscarProfile
    wiscar_average: float
    overall_score: int
    tier: Tier
    career_matches: Tuple[CareerMatch, ...] = field(default_factory=tuple)
    learning_path: Tuple[LearningStage, ...] = field(default_factory=tuple)
    next_steps: Optional[NextSteps] = None

    def to_dict(self):
        return {
            'psychological': self.psychological,
            'technical': self.technical,
            'wiscar': self.wiscar.as_dict(),
            'wiscar_average': round(self.wiscar_average, 2),
            'overall_score': self.overall_score,
            'recommendation': self.tier.value,
            'career_matches': [asdict(c) for c in self.career_matches],
            'learning_path': [asdict(s) for s in self.learning_path],
            'next_steps': {
                'heading': self.next_steps.heading,
                'actions': list(self.next_steps.actions),
            } if self.next_steps else None,
        }
