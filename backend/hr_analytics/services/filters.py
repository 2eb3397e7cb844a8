"""Employee list filtering: department exact match and free-text search."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from hr_analytics.models.employee import Employee

_BASE_QUERY = "SELECT * FROM c"

# Case-insensitive substring on name, any skill, or designation
_SEARCH_CLAUSE = (
    "(CONTAINS(c.name, @search, true)"
    " OR EXISTS(SELECT VALUE s FROM s IN c.skills WHERE CONTAINS(s, @search, true))"
    " OR CONTAINS(c.designation, @search, true))"
)


class FilterCriteria(BaseModel):
    """Immutable filter for the employee list. Empty values mean "no filter"."""

    model_config = ConfigDict(frozen=True)

    department: str | None = None
    search: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.department and not self.search


def build_query(criteria: FilterCriteria) -> tuple[str, list[dict[str, Any]]]:
    """Translate criteria into a parameterized Cosmos DB SQL query."""
    clauses: list[str] = []
    params: list[dict[str, Any]] = []

    if criteria.department:
        clauses.append("c.department = @department")
        params.append({"name": "@department", "value": criteria.department})

    if criteria.search:
        clauses.append(_SEARCH_CLAUSE)
        params.append({"name": "@search", "value": criteria.search})

    if not clauses:
        return _BASE_QUERY, params
    return f"{_BASE_QUERY} WHERE {' AND '.join(clauses)}", params


def matches(employee: Employee, criteria: FilterCriteria) -> bool:
    """In-memory equivalent of :func:`build_query` for a single record."""
    if criteria.department and employee.department != criteria.department:
        return False

    if criteria.search:
        needle = criteria.search.lower()
        if needle in employee.name.lower() or needle in employee.designation.lower():
            return True
        return any(needle in skill.lower() for skill in employee.skills)

    return True


def apply_filter(employees: list[Employee], criteria: FilterCriteria) -> list[Employee]:
    if criteria.is_empty:
        return list(employees)
    return [e for e in employees if matches(e, criteria)]
