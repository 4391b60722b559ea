"""Employee Mapper — pure translation between public and upstream employee shapes.

Invariants:
    - Field-for-field copy/rename only; never fabricates or drops a field
    - No IO, no error cases
"""

from employee_proxy.schemas.employee import (
    CreateEmployeeRequest, Employee, UpstreamEmployee,
)


def to_public(upstream: UpstreamEmployee) -> Employee:
    """Rename upstream `employee_*` fields to the public shape."""
    return Employee(
        id=upstream.id,
        name=upstream.employee_name,
        salary=upstream.employee_salary,
        age=upstream.employee_age,
        title=upstream.employee_title,
        email=upstream.employee_email,
    )


def to_upstream_create_payload(request: CreateEmployeeRequest) -> dict:
    """Build the upstream POST body. Upstream does not accept email on create."""
    return {
        "name": request.name,
        "salary": request.salary,
        "age": request.age,
        "title": request.title,
    }
