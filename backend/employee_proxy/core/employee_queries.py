"""Employee Queries — pure read-side aggregates over a fetched employee list.

Invariants:
    - Input order is preserved wherever a subset is returned
    - Null names never match a search; null salaries never win a max
    - Top-N ordering: salary descending, nulls last, stable on ties

Design Decisions:
    - Pure functions separate from the proxy service: the service sequences IO,
      these compute
"""

from employee_proxy.core.domain_types import TOP_EARNERS_LIMIT
from employee_proxy.schemas.employee import Employee


def filter_by_name(employees: list[Employee], fragment: str) -> list[Employee]:
    """Case-insensitive substring match on name."""
    needle = fragment.lower()
    return [
        e for e in employees
        if e.name is not None and needle in e.name.lower()
    ]


def highest_salary(employees: list[Employee]) -> int:
    """Max non-null salary, or 0 when there is none."""
    return max(
        (e.salary for e in employees if e.salary is not None),
        default=0,
    )


def top_names_by_salary(
    employees: list[Employee], limit: int = TOP_EARNERS_LIMIT,
) -> list[str | None]:
    """Names of the `limit` highest earners, highest first."""
    # sorted() is stable; the (is None, -salary) key puts nulls after every number
    ranked = sorted(
        employees,
        key=lambda e: (e.salary is None, -(e.salary or 0)),
    )
    return [e.name for e in ranked[:limit]]
