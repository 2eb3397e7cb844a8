from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from hr_analytics.main import app
from hr_analytics.models.employee import Employee
from hr_analytics.services.employee_service import employee_service


def _employee(**overrides: Any) -> Employee:
    data: dict[str, Any] = {
        "id": "E000",
        "name": "Test Employee",
        "department": "Engineering",
        "designation": "Engineer",
        "performanceRating": 4.0,
        "salary": 100000,
        "skills": ["Python"],
        "projectsCompleted": 0,
        "isActive": True,
    }
    data.update(overrides)
    return Employee.model_validate(data)


@pytest.fixture
def make_employee():
    return _employee


@pytest.fixture
def sample_employees() -> list[Employee]:
    return [
        _employee(
            id="E001",
            name="Alice Chen",
            department="Executive",
            designation="CEO",
            performanceRating=4.8,
            salary=240000,
            skills=["Strategy"],
            projectsCompleted=10,
            yearsAtCompany=6,
            manager="Board",
            createdAt=datetime(2024, 1, 1, tzinfo=timezone.utc),
        ),
        _employee(
            id="E002",
            name="Bob Smith",
            department="Engineering",
            designation="Backend Engineer",
            performanceRating=4.6,
            salary=120000,
            skills=["Go", "Rust"],
            projectsCompleted=15,
            yearsAtCompany=3,
            manager="Alice Chen",
            createdAt=datetime(2024, 3, 1, tzinfo=timezone.utc),
        ),
        _employee(
            id="E003",
            name="Carol Diaz",
            department="Engineering",
            designation="Frontend Developer",
            performanceRating=3.5,
            salary=90000,
            skills=["React"],
            projectsCompleted=2,
            yearsAtCompany=1,
            manager="Bob Smith",
            createdAt=datetime(2024, 5, 1, tzinfo=timezone.utc),
        ),
        _employee(
            id="E004",
            name="Dan Wu",
            department="Sales",
            designation="Account Manager",
            performanceRating=3.2,
            salary=70000,
            skills=["CRM"],
            projectsCompleted=1,
            yearsAtCompany=2,
            manager="Alice Chen",
            isActive=False,
            createdAt=datetime(2024, 7, 1, tzinfo=timezone.utc),
        ),
    ]


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(sample_employees):
    with TestClient(app) as c:
        employee_service.snapshot = list(sample_employees)
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
