from __future__ import annotations

import pytest

from hr_analytics.models.employee import ScoredEmployee
from hr_analytics.services.recommendations import recommend, score_employee


def test_score_formula(make_employee):
    employee = make_employee(performanceRating=4.6, projectsCompleted=15, yearsAtCompany=3)
    assert score_employee(employee) == pytest.approx(80.5)


def test_missing_years_count_as_zero(make_employee):
    employee = make_employee(performanceRating=4.0, projectsCompleted=5)
    assert employee.years_at_company is None
    assert score_employee(employee) == pytest.approx(50.0)


def test_high_rating_below_score_threshold_is_leadership_only(make_employee):
    employee = make_employee(id="x", performanceRating=4.8, projectsCompleted=10, yearsAtCompany=6)

    result = recommend([employee])

    assert result.promotion == []
    assert result.training == []
    assert [c.id for c in result.leadership] == ["x"]
    assert result.leadership[0].score == pytest.approx(77.0)


def test_promotion_requires_score_and_rating(make_employee):
    promoted = make_employee(id="p", performanceRating=4.6, projectsCompleted=15, yearsAtCompany=3)
    high_score_low_rating = make_employee(id="q", performanceRating=4.4, projectsCompleted=30, yearsAtCompany=2)

    result = recommend([promoted, high_score_low_rating])

    assert [c.id for c in result.promotion] == ["p"]
    assert isinstance(result.promotion[0], ScoredEmployee)


def test_promotion_sorted_by_descending_score(make_employee):
    employees = [
        make_employee(id="low", performanceRating=4.5, projectsCompleted=18),
        make_employee(id="high", performanceRating=5.0, projectsCompleted=25),
        make_employee(id="mid", performanceRating=4.9, projectsCompleted=20),
    ]

    result = recommend(employees)

    assert [c.id for c in result.promotion] == ["high", "mid", "low"]


def test_training_sorted_by_ascending_rating(make_employee):
    employees = [
        make_employee(id="a", performanceRating=3.9),
        make_employee(id="b", performanceRating=2.1),
        make_employee(id="c", performanceRating=4.0),
        make_employee(id="d", performanceRating=3.0),
    ]

    result = recommend(employees)

    assert [c.id for c in result.training] == ["b", "d", "a"]


def test_leadership_boundaries(make_employee):
    employees = [
        make_employee(id="exact-years", performanceRating=4.3, yearsAtCompany=5),
        make_employee(id="rating-at-threshold", performanceRating=4.2, yearsAtCompany=9),
        make_employee(id="too-new", performanceRating=4.9, yearsAtCompany=4.5),
        make_employee(id="no-years", performanceRating=4.9),
    ]

    result = recommend(employees)

    assert [c.id for c in result.leadership] == ["exact-years"]


def test_inactive_employees_are_never_recommended(make_employee):
    employees = [
        make_employee(id="off-1", isActive=False, performanceRating=5.0, projectsCompleted=40, yearsAtCompany=10),
        make_employee(id="off-2", isActive=False, performanceRating=1.0),
    ]

    result = recommend(employees)

    assert result.promotion == []
    assert result.training == []
    assert result.leadership == []


def test_employee_can_appear_in_several_lists(make_employee):
    employee = make_employee(id="star", performanceRating=4.9, projectsCompleted=20, yearsAtCompany=7)

    result = recommend([employee])

    assert [c.id for c in result.promotion] == ["star"]
    assert [c.id for c in result.leadership] == ["star"]


def test_scored_employee_keeps_employee_fields(make_employee):
    employee = make_employee(id="p", name="Pat", performanceRating=4.6, projectsCompleted=15, yearsAtCompany=3)

    payload = recommend([employee]).model_dump(by_alias=True)
    candidate = payload["promotion"][0]

    assert candidate["id"] == "p"
    assert candidate["name"] == "Pat"
    assert candidate["performanceRating"] == 4.6
    assert candidate["score"] == pytest.approx(80.5)
