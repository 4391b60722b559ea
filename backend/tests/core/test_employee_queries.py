"""Employee Queries — verifies search, highest salary and top-N ordering.

Tests:
    - Search is case-insensitive substring on name; null names never match
    - Search preserves input order
    - Highest salary ignores nulls; empty/all-null collections give 0
    - Top-N: salary descending, nulls last, stable on ties, at most `limit`
"""

from employee_proxy.core.domain_types import TOP_EARNERS_LIMIT
from employee_proxy.core.employee_queries import (
    filter_by_name, highest_salary, top_names_by_salary,
)
from employee_proxy.schemas.employee import Employee


def _emp(employee_id: str, name: str | None = None, salary: int | None = None) -> Employee:
    return Employee(id=employee_id, name=name, salary=salary)


# -- filter_by_name ------------------------------------------------------------

def test_search_is_case_insensitive_substring():
    employees = [_emp("1", "Alpha"), _emp("2", "Beta"), _emp("3", "CALVIN")]
    result = filter_by_name(employees, "al")
    assert [e.id for e in result] == ["1", "3"]


def test_search_skips_null_names():
    employees = [_emp("1", None), _emp("2", "Alice")]
    assert [e.id for e in filter_by_name(employees, "a")] == ["2"]


def test_search_preserves_relative_order():
    employees = [_emp("3", "Anna"), _emp("1", "Hannah"), _emp("2", "Bob"), _emp("4", "Joanna")]
    assert [e.id for e in filter_by_name(employees, "ANN")] == ["3", "1", "4"]


def test_search_empty_fragment_matches_every_named_employee():
    employees = [_emp("1", "A"), _emp("2", None), _emp("3", "")]
    assert [e.id for e in filter_by_name(employees, "")] == ["1", "3"]


def test_search_no_match_returns_empty():
    assert filter_by_name([_emp("1", "Alice")], "zzz") == []


# -- highest_salary ------------------------------------------------------------

def test_highest_salary_picks_max():
    employees = [_emp("1", salary=100), _emp("2", salary=250), _emp("3", salary=5)]
    assert highest_salary(employees) == 250


def test_highest_salary_ignores_nulls():
    employees = [_emp("1", salary=None), _emp("2", salary=42)]
    assert highest_salary(employees) == 42


def test_highest_salary_empty_is_zero():
    assert highest_salary([]) == 0


def test_highest_salary_all_null_is_zero():
    assert highest_salary([_emp("1"), _emp("2")]) == 0


# -- top_names_by_salary -------------------------------------------------------

def test_top_ten_of_eleven_drops_lowest():
    employees = [_emp(str(i), f"N{i}", i) for i in range(1, 12)]
    names = top_names_by_salary(employees)
    assert len(names) == TOP_EARNERS_LIMIT
    assert names[0] == "N11"
    assert names[-1] == "N2"
    assert "N1" not in names


def test_top_names_fewer_than_limit_returns_all_sorted():
    employees = [_emp("1", "Low", 10), _emp("2", "High", 30), _emp("3", "Mid", 20)]
    assert top_names_by_salary(employees) == ["High", "Mid", "Low"]


def test_top_names_nulls_last_in_original_order():
    employees = [
        _emp("1", "NullA", None),
        _emp("2", "Paid", 1),
        _emp("3", "NullB", None),
    ]
    assert top_names_by_salary(employees) == ["Paid", "NullA", "NullB"]


def test_top_names_ties_are_stable():
    employees = [
        _emp("1", "First", 50),
        _emp("2", "Top", 90),
        _emp("3", "Second", 50),
        _emp("4", "Third", 50),
    ]
    assert top_names_by_salary(employees) == ["Top", "First", "Second", "Third"]


def test_top_names_zero_salary_ranks_before_null():
    employees = [_emp("1", "Null", None), _emp("2", "Zero", 0)]
    assert top_names_by_salary(employees) == ["Zero", "Null"]


def test_top_names_respects_custom_limit():
    employees = [_emp(str(i), f"N{i}", i) for i in range(5)]
    assert top_names_by_salary(employees, limit=2) == ["N4", "N3"]


def test_top_names_empty():
    assert top_names_by_salary([]) == []
