"""Dashboard statistics computed over a snapshot of employee records."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from hr_analytics.models.analytics import (
    DepartmentCount,
    EmployeeStats,
    RecentActivity,
    SalaryPoint,
)
from hr_analytics.models.employee import Employee

RECENT_ACTIVITY_LIMIT = 3

# Fixed display curve applied to the average monthly payroll; not historical data.
SALARY_TREND_FACTORS: list[tuple[str, float]] = [
    ("Jan", 0.90),
    ("Feb", 0.92),
    ("Mar", 0.95),
    ("Apr", 0.98),
    ("May", 0.96),
    ("Jun", 1.0),
]

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike :func:`round`."""
    return math.floor(value + 0.5)


def format_one_decimal(value: float) -> str:
    """Format like JavaScript `toFixed(1)`: exact ties round up, not to even."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def salary_trend(total_salary: float) -> list[SalaryPoint]:
    monthly = round_half_up(total_salary / 12)
    points: list[SalaryPoint] = []
    for month, factor in SALARY_TREND_FACTORS:
        amount = monthly if factor == 1.0 else round_half_up(monthly * factor)
        points.append(SalaryPoint(name=month, amt=amount))
    return points


def department_distribution(employees: list[Employee]) -> list[DepartmentCount]:
    counts: dict[str, int] = {}
    for emp in employees:
        counts[emp.department] = counts.get(emp.department, 0) + 1
    return [DepartmentCount(department=dept, count=count) for dept, count in counts.items()]


def _created_key(employee: Employee) -> datetime:
    created = employee.created_at
    if created is None:
        return _EPOCH
    if created.tzinfo is None:
        return created.replace(tzinfo=timezone.utc)
    return created


def recent_activity(employees: list[Employee], limit: int = RECENT_ACTIVITY_LIMIT) -> list[RecentActivity]:
    newest = sorted(employees, key=_created_key, reverse=True)[:limit]
    return [
        RecentActivity(name=e.name, designation=e.designation, created_at=e.created_at)
        for e in newest
    ]


def compute_stats(employees: list[Employee]) -> EmployeeStats:
    total = len(employees)
    active = sum(1 for e in employees if e.is_active)
    total_salary = sum(e.salary for e in employees)

    if total:
        avg_salary = round_half_up(total_salary / total)
        avg_rating: str | int = format_one_decimal(sum(e.performance_rating for e in employees) / total)
    else:
        avg_salary = 0
        avg_rating = 0

    return EmployeeStats(
        total_employees=total,
        active_count=active,
        inactive_count=total - active,
        avg_salary=avg_salary,
        avg_rating=avg_rating,
        total_projects=sum(e.projects_completed for e in employees),
        dept_dist=department_distribution(employees),
        salary_trend=salary_trend(total_salary),
        recent_activity=recent_activity(employees),
    )
