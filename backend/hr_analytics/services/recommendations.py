from __future__ import annotations

from hr_analytics.models.analytics import Recommendations
from hr_analytics.models.employee import Employee, ScoredEmployee

WEIGHT_RATING = 10.0
WEIGHT_PROJECTS = 2.0
WEIGHT_YEARS = 1.5

PROMOTION_MIN_SCORE = 80.0
PROMOTION_MIN_RATING = 4.5
TRAINING_MAX_RATING = 4.0
LEADERSHIP_MIN_YEARS = 5.0
LEADERSHIP_MIN_RATING = 4.2


def score_employee(employee: Employee) -> float:
    years = employee.years_at_company or 0.0
    return (
        employee.performance_rating * WEIGHT_RATING
        + employee.projects_completed * WEIGHT_PROJECTS
        + years * WEIGHT_YEARS
    )


def _with_score(employee: Employee) -> ScoredEmployee:
    return ScoredEmployee(**employee.model_dump(), score=score_employee(employee))


def is_promotion_candidate(candidate: ScoredEmployee) -> bool:
    return candidate.score > PROMOTION_MIN_SCORE and candidate.performance_rating >= PROMOTION_MIN_RATING


def is_training_candidate(candidate: ScoredEmployee) -> bool:
    return candidate.performance_rating < TRAINING_MAX_RATING


def is_leadership_candidate(candidate: ScoredEmployee) -> bool:
    years = candidate.years_at_company
    return years is not None and years >= LEADERSHIP_MIN_YEARS and candidate.performance_rating > LEADERSHIP_MIN_RATING


def recommend(employees: list[Employee]) -> Recommendations:
    """Score active employees and split them into candidate lists.

    An employee may land in several lists. Inactive employees are dropped
    even if the caller passes them in.
    """
    scored = [_with_score(e) for e in employees if e.is_active]

    promotion = sorted(
        (c for c in scored if is_promotion_candidate(c)),
        key=lambda c: c.score,
        reverse=True,
    )
    training = sorted(
        (c for c in scored if is_training_candidate(c)),
        key=lambda c: c.performance_rating,
    )
    leadership = [c for c in scored if is_leadership_candidate(c)]

    return Recommendations(promotion=promotion, training=training, leadership=leadership)
