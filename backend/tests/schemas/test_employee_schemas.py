"""Employee Schemas — verifies envelope decoding and create-request validation.

Tests:
    - Envelope[T] decodes list, entity and boolean payloads; ignores unknown fields
    - Envelope data defaults to None when absent
    - CreateEmployeeRequest rejects missing/blank/out-of-range fields
    - Employee is immutable
"""

import pytest
from pydantic import ValidationError

from employee_proxy.schemas.employee import (
    CreateEmployeeRequest, Employee, Envelope, UpstreamEmployee,
)


def test_envelope_decodes_employee_list_and_ignores_extras():
    raw = (
        '{"data": [{"id": "1", "employee_name": "Alice", "employee_salary": 100,'
        ' "unknown": true}], "status": "ok", "extra": 1}'
    )
    env = Envelope[list[UpstreamEmployee]].model_validate_json(raw)
    assert env.status == "ok"
    assert env.data[0].employee_name == "Alice"
    assert env.data[0].employee_salary == 100


def test_envelope_decodes_boolean():
    env = Envelope[bool].model_validate_json('{"data": true, "status": "ok"}')
    assert env.data is True


def test_envelope_missing_data_is_none():
    env = Envelope[UpstreamEmployee].model_validate_json('{"status": "ok"}')
    assert env.data is None


def test_create_request_valid_and_stripped():
    req = CreateEmployeeRequest(name="  New ", salary=500, age=28, title="Eng")
    assert req.name == "New"


@pytest.mark.parametrize("payload", [
    {},
    {"salary": 500, "age": 28, "title": "Eng"},
    {"name": "   ", "salary": 500, "age": 28, "title": "Eng"},
    {"name": "New", "salary": 0, "age": 28, "title": "Eng"},
    {"name": "New", "salary": 500, "age": 15, "title": "Eng"},
    {"name": "New", "salary": 500, "age": 76, "title": "Eng"},
    {"name": "New", "salary": 500, "age": 28, "title": ""},
])
def test_create_request_rejects_invalid(payload):
    with pytest.raises(ValidationError):
        CreateEmployeeRequest(**payload)


def test_employee_is_frozen():
    employee = Employee(id="1", name="Alice")
    with pytest.raises(ValidationError):
        employee.name = "Bob"
