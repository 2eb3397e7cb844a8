from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from hr_analytics.models.analytics import EmployeeStats, OrgChart, Recommendations
from hr_analytics.models.employee import Employee, StatusUpdate
from hr_analytics.services.employee_service import EmployeeRetrievalError, employee_service
from hr_analytics.services.filters import FilterCriteria
from hr_analytics.services.org_hierarchy import build_org_chart
from hr_analytics.services.recommendations import recommend
from hr_analytics.services.statistics import compute_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _retrieval_failed(err: EmployeeRetrievalError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(err)},
    )


@router.get("", response_model=list[Employee])
async def list_employees(department: str | None = None, search: str | None = None):
    criteria = FilterCriteria(department=department, search=search)
    try:
        return await employee_service.list_employees(criteria)
    except EmployeeRetrievalError as err:
        logger.exception("Failed to list employees (department=%s search=%s)", department, search)
        return _retrieval_failed(err)


@router.get("/stats", response_model=EmployeeStats)
async def employee_stats():
    try:
        employees = await employee_service.list_employees()
    except EmployeeRetrievalError as err:
        logger.exception("Failed to compute employee stats")
        return _retrieval_failed(err)
    return compute_stats(employees)


@router.get("/recommend", response_model=Recommendations)
async def employee_recommendations():
    try:
        employees = await employee_service.get_active_employees()
    except EmployeeRetrievalError as err:
        logger.exception("Failed to compute recommendations")
        return _retrieval_failed(err)

    result = recommend(employees)
    logger.info(
        "Recommendations: promotion=%d training=%d leadership=%d",
        len(result.promotion),
        len(result.training),
        len(result.leadership),
    )
    return result


@router.get("/org-chart", response_model=OrgChart)
async def org_chart(search: str | None = None):
    try:
        employees = await employee_service.list_employees()
    except EmployeeRetrievalError as err:
        logger.exception("Failed to build org chart")
        return _retrieval_failed(err)
    return build_org_chart(employees, search=search)


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(employee_id: str):
    try:
        employee = await employee_service.get_employee(employee_id)
    except EmployeeRetrievalError as err:
        logger.exception("Failed to get employee %s", employee_id)
        return _retrieval_failed(err)

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{employee_id}' not found",
        )

    return employee


@router.patch("/{employee_id}/status", response_model=Employee)
async def update_employee_status(employee_id: str, update: StatusUpdate):
    try:
        employee = await employee_service.set_active(employee_id, update.is_active)
    except EmployeeRetrievalError as err:
        logger.exception("Failed to update status of employee %s", employee_id)
        return _retrieval_failed(err)

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{employee_id}' not found",
        )

    return employee
