"""Employee Schemas — public and upstream wire shapes with field-level validation.

Invariants:
    - Employee is the public shape; UpstreamEmployee mirrors the upstream field names
    - Employee is immutable (frozen) — built fresh per request, never mutated
    - Envelope[T] is the single wrapper for list, entity and boolean upstream payloads
    - Unknown upstream fields are ignored, never rejected
    - CreateEmployeeRequest rejects incomplete input before any upstream call

Design Decisions:
    - Generic Envelope over per-shape wrapper types: one model, parametrized at the call site
    - Create constraints mirror the upstream mock server (salary > 0, age 16-75)
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class Employee(BaseModel):
    """Public employee representation."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    salary: int | None = None
    age: int | None = None
    title: str | None = None
    email: str | None = None


class UpstreamEmployee(BaseModel):
    """Employee as returned by the upstream service."""
    model_config = ConfigDict(extra="ignore")

    id: str
    employee_name: str | None = None
    employee_salary: int | None = None
    employee_age: int | None = None
    employee_title: str | None = None
    employee_email: str | None = None


class Envelope(BaseModel, Generic[T]):
    """Upstream `{data, status}` response wrapper."""
    model_config = ConfigDict(extra="ignore")

    data: T | None = None
    status: str | None = None


class CreateEmployeeRequest(BaseModel):
    """Employee creation input — email is assigned upstream."""
    name: str = Field(min_length=1, max_length=255)
    salary: int = Field(gt=0)
    age: int = Field(ge=16, le=75)
    title: str = Field(min_length=1, max_length=255)

    @field_validator("name", "title")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class DeleteEmployeeRequest(BaseModel):
    """Upstream delete body — the upstream deletes by name, not by id."""
    name: str
