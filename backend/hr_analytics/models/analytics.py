"""Response models for dashboard statistics, recommendations and the org chart."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from hr_analytics.models.employee import CamelModel, ScoredEmployee


class DepartmentCount(CamelModel):
    department: str
    count: int


class SalaryPoint(CamelModel):
    name: str
    amt: int


class RecentActivity(CamelModel):
    name: str
    designation: str
    created_at: datetime | None = None


class EmployeeStats(CamelModel):
    """Aggregate figures shown on the dashboard."""

    total_employees: int
    active_count: int
    inactive_count: int
    avg_salary: int
    # one-decimal string such as "4.3", or 0 for an empty collection
    avg_rating: str | int
    total_projects: int
    dept_dist: list[DepartmentCount]
    salary_trend: list[SalaryPoint]
    recent_activity: list[RecentActivity]


class Recommendations(CamelModel):
    promotion: list[ScoredEmployee]
    training: list[ScoredEmployee]
    leadership: list[ScoredEmployee]


class OrgNode(CamelModel):
    """One employee in the reporting tree.

    ``direct_reports`` counts every employee linked to this one, including
    reports already placed elsewhere in the chart and therefore absent from
    ``children``.
    """

    id: str
    name: str
    department: str
    designation: str
    direct_reports: int = 0
    matched: bool = True
    children: list[OrgNode] = Field(default_factory=list)


class OrgChart(CamelModel):
    roots: list[OrgNode]
    orphans: list[OrgNode]
    headcount: int
    leaders: int
    departments: int
    depth: int
