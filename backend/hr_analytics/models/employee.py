"""Employee models for the Cosmos DB employee collection."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, as stored and served."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Employee(CamelModel):
    """A single employee record."""

    id: str
    name: str
    department: str
    designation: str
    performance_rating: float
    salary: float
    skills: list[str]
    projects_completed: int = 0
    manager: str | None = None
    manager_id: str | None = None
    years_at_company: float | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ScoredEmployee(Employee):
    """Employee plus the recommendation score, never persisted."""

    score: float


class StatusUpdate(CamelModel):
    """Request body for toggling an employee's active status."""

    is_active: bool
