# assessment/results.py
import logging
from fractions import Fraction

from assessment.models import (
    CareerMatch,
    LearningStage,
    NextSteps,
    RecommendationResult,
    Tier,
)
from assessment.scoring import round_half_up

logger = logging.getLogger(__name__)

YES_THRESHOLD = 75
MAYBE_THRESHOLD = 50

# role, description, floor, offset
CAREER_PATHS = [
    ("BI Analyst", "Builds dashboards, extracts KPIs, advises teams", 60, -10),
    ("Data Analyst", "Analyzes trends, answers questions with data", 55, -15),
    ("Data Visualization Specialist", "Designs compelling dashboards and reports", 70, 0),
    ("Operations Analyst", "Uses BI to improve workflows and efficiencies", 50, -20),
    ("Self-Service BI Developer", "Supports teams in creating their own reports", 65, -5),
]

BEGINNER = LearningStage("Beginner", "Power BI Desktop, Tableau Basics, KPIs",
                         "Microsoft Learn, Tableau Public")
INTERMEDIATE = LearningStage("Intermediate", "DAX, calculated fields, data blending",
                             "Coursera, Udemy, YouTube")
ADVANCED = LearningStage("Advanced", "Advanced dashboards, certifications",
                         "DA-100, Tableau Desktop Specialist")

LEARNING_PATH_BY_TIER = {
    Tier.YES: (BEGINNER, INTERMEDIATE, ADVANCED),
    Tier.MAYBE: (BEGINNER, INTERMEDIATE, ADVANCED),
    Tier.NO: (BEGINNER, INTERMEDIATE, ADVANCED),
}

NEXT_STEPS_BY_TIER = {
    Tier.YES: NextSteps("Recommended Actions", (
        "Begin with Power BI Desktop and Microsoft Learn modules",
        "Join Makeover Monday for Tableau practice",
        "Start building a portfolio of data visualizations",
        "Consider pursuing Microsoft Power BI certification",
    )),
    Tier.MAYBE: NextSteps("Suggested Preparation", (
        "Strengthen Excel skills with advanced formulas and pivot tables",
        "Take an introductory data analysis course",
        "Practice with free BI tools and sample datasets",
        "Reassess after 3-6 months of preparation",
    )),
    Tier.NO: NextSteps("Alternative Paths", (
        "Consider Excel-based analytics roles first",
        "Explore Data Storytelling with simpler tools",
        "Look into operational reporting roles",
        "Build foundational analytical skills before BI tools",
    )),
}


def overall_score(psychological, technical, wiscar):
    # exact mean so the only rounding is the final one
    wiscar_mean = Fraction(sum(score for _, score in wiscar.items()), len(wiscar.items()))
    return round_half_up((psychological + technical + wiscar_mean) / 3)


def recommendation_tier(score):
    if score >= YES_THRESHOLD:
        return Tier.YES
    if score >= MAYBE_THRESHOLD:
        return Tier.MAYBE
    return Tier.NO


def score_band(score):
    """Display band for any percentage: success, warning or destructive."""
    if score >= YES_THRESHOLD:
        return "success"
    if score >= MAYBE_THRESHOLD:
        return "warning"
    return "destructive"


def career_matches(score):
    return tuple(
        CareerMatch(role=role, description=description, match=max(floor, score + offset))
        for role, description, floor, offset in CAREER_PATHS
    )


def synthesize(psychological, technical, wiscar):
    """Combine the three top-level scores into the full recommendation."""
    score = overall_score(psychological, technical, wiscar)
    tier = recommendation_tier(score)
    logger.info(f"Overall score {score} -> recommendation '{tier.value}'")
    return RecommendationResult(
        psychological=psychological,
        technical=technical,
        wiscar=wiscar,
        wiscar_average=wiscar.average,
        overall_score=score,
        tier=tier,
        career_matches=career_matches(score),
        learning_path=LEARNING_PATH_BY_TIER[tier],
        next_steps=NEXT_STEPS_BY_TIER[tier],
    )
