"""Employee Routes — public REST surface over EmployeeProxyService.

Invariants:
    - Routes never contain business logic (delegate to EmployeeProxyService)
    - Outcomes become HTTP only here: NotFound → 404, RateLimited → 429,
      UpstreamFailure → 502
    - Invalid create bodies are rejected by Pydantic before the service is called
    - Literal paths (/search, /highestSalary, /topTen...) registered before /{employee_id}

Design Decisions:
    - Paths keep the upstream-facing camelCase names clients already use
    - Delete returns the deleted name as text/plain
"""

import logging
from typing import TypeVar

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from employee_proxy.api.dependencies import get_employee_service
from employee_proxy.core.errors import (
    EmployeeNotCreatedError, ErrorContext, ResourceNotFoundError,
    UpstreamRateLimitedError, UpstreamServiceError,
)
from employee_proxy.core.outcomes import NotFound, Ok, Outcome, RateLimited
from employee_proxy.schemas.employee import CreateEmployeeRequest, Employee
from employee_proxy.services.employee_proxy import EmployeeProxyService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/employee", tags=["employees"])

T = TypeVar("T")


def unwrap(
    outcome: Outcome[T], *, operation: str, employee_id: str | None = None,
) -> T:
    """Return the Ok value or raise the matching EmployeeProxyError."""
    if isinstance(outcome, Ok):
        return outcome.value
    context = ErrorContext(employee_id=employee_id, operation=operation)
    if isinstance(outcome, RateLimited):
        raise UpstreamRateLimitedError(outcome.retry_after_seconds, context)
    if isinstance(outcome, NotFound):
        raise ResourceNotFoundError("Employee", employee_id or "", context)
    raise UpstreamServiceError(outcome.reason, outcome.status_code, context)


@router.get("", response_model=list[Employee])
async def get_all_employees(
    service: EmployeeProxyService = Depends(get_employee_service),
):
    """List every employee, in upstream order."""
    logger.debug("HTTP GET /api/v1/employee")
    return unwrap(await service.get_all(), operation="get_all")


@router.get("/search/{search_string}", response_model=list[Employee])
async def search_employees_by_name(
    search_string: str,
    service: EmployeeProxyService = Depends(get_employee_service),
):
    """Employees whose name contains `search_string`, case-insensitive."""
    logger.debug(f"HTTP GET /api/v1/employee/search/{search_string}")
    return unwrap(
        await service.search_by_name(search_string), operation="search_by_name",
    )


@router.get("/highestSalary", response_model=int)
async def get_highest_salary(
    service: EmployeeProxyService = Depends(get_employee_service),
):
    logger.debug("HTTP GET /api/v1/employee/highestSalary")
    return unwrap(
        await service.get_highest_salary(), operation="get_highest_salary",
    )


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str | None])
async def get_top_ten_highest_earning_employee_names(
    service: EmployeeProxyService = Depends(get_employee_service),
):
    logger.debug("HTTP GET /api/v1/employee/topTenHighestEarningEmployeeNames")
    return unwrap(
        await service.get_top_ten_names_by_salary(),
        operation="get_top_ten_names_by_salary",
    )


@router.get("/{employee_id}", response_model=Employee)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeProxyService = Depends(get_employee_service),
):
    logger.debug(f"HTTP GET /api/v1/employee/{employee_id}")
    return unwrap(
        await service.get_by_id(employee_id),
        operation="get_by_id", employee_id=employee_id,
    )


@router.post("", response_model=Employee)
async def create_employee(
    body: CreateEmployeeRequest,
    service: EmployeeProxyService = Depends(get_employee_service),
):
    """Create an employee upstream. 400 if the upstream returns no entity."""
    logger.debug(f"HTTP POST /api/v1/employee name={body.name}")
    created = unwrap(await service.create(body), operation="create")
    if created is None:
        raise EmployeeNotCreatedError(ErrorContext(operation="create"))
    return created


@router.delete("/{employee_id}", response_class=PlainTextResponse)
async def delete_employee_by_id(
    employee_id: str,
    service: EmployeeProxyService = Depends(get_employee_service),
):
    """Delete by id; responds with the deleted employee's name."""
    logger.debug(f"HTTP DELETE /api/v1/employee/{employee_id}")
    return unwrap(
        await service.delete_by_id(employee_id),
        operation="delete_by_id", employee_id=employee_id,
    )
