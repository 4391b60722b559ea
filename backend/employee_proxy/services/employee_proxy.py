"""Employee Proxy Service — orchestrates upstream calls, mapping and aggregate queries.

Invariants:
    - Every operation re-fetches from upstream; nothing is cached between calls
    - Reads make exactly one upstream call; delete_by_id makes at most two
    - RateLimited and UpstreamFailure from any sub-call are returned unchanged
    - NotFound is a normal return value, never raised
    - delete_by_id never calls the delete endpoint when the lookup is not Ok

Design Decisions:
    - Impureim sandwich: fetch (IO) → core/employee_queries (pure) → wrap in Ok
    - Delete is GET-then-DELETE-by-name because the upstream deletes by name;
      if the record changes between the two calls the upstream result decides
"""

import logging

from employee_proxy.core.employee_mapper import to_public, to_upstream_create_payload
from employee_proxy.core.employee_queries import (
    filter_by_name, highest_salary, top_names_by_salary,
)
from employee_proxy.core.outcomes import NotFound, Ok, Outcome
from employee_proxy.infrastructure.upstream_client import UpstreamEmployeeClient
from employee_proxy.schemas.employee import CreateEmployeeRequest, Employee

logger = logging.getLogger(__name__)


class EmployeeProxyService:
    """Public employee operations backed by the upstream service."""

    def __init__(self, upstream: UpstreamEmployeeClient):
        self.upstream = upstream

    async def get_all(self) -> Outcome[list[Employee]]:
        result = await self.upstream.list_all()
        if not isinstance(result, Ok):
            return result
        return Ok([to_public(e) for e in result.value])

    async def search_by_name(self, fragment: str) -> Outcome[list[Employee]]:
        result = await self.get_all()
        if not isinstance(result, Ok):
            return result
        matches = filter_by_name(result.value, fragment)
        logger.debug(
            f"Search '{fragment}' matched {len(matches)} employee(s)",
            extra={"operation": "search_by_name", "count": len(matches)},
        )
        return Ok(matches)

    async def get_by_id(self, employee_id: str) -> Outcome[Employee]:
        result = await self.upstream.get_one(employee_id)
        if not isinstance(result, Ok):
            return result
        return Ok(to_public(result.value))

    async def get_highest_salary(self) -> Outcome[int]:
        result = await self.get_all()
        if not isinstance(result, Ok):
            return result
        highest = highest_salary(result.value)
        logger.debug(
            f"Computed highest salary: {highest}",
            extra={"operation": "get_highest_salary"},
        )
        return Ok(highest)

    async def get_top_ten_names_by_salary(self) -> Outcome[list[str | None]]:
        result = await self.get_all()
        if not isinstance(result, Ok):
            return result
        return Ok(top_names_by_salary(result.value))

    async def create(self, request: CreateEmployeeRequest) -> Outcome[Employee | None]:
        """Create upstream. Ok(None) if the upstream returned no entity."""
        result = await self.upstream.create(to_upstream_create_payload(request))
        if not isinstance(result, Ok):
            return result
        created = to_public(result.value) if result.value is not None else None
        logger.info(
            f"Created employee: {created.id if created else '<none>'}",
            extra={
                "operation": "create",
                "employee_id": created.id if created else None,
            },
        )
        return Ok(created)

    async def delete_by_id(self, employee_id: str) -> Outcome[str]:
        """Resolve the name by id, then delete by name. Ok(name) on success."""
        lookup = await self.get_by_id(employee_id)
        if isinstance(lookup, NotFound):
            logger.info(
                f"Delete skipped; employee not found for id: {employee_id}",
                extra={"operation": "delete_by_id", "employee_id": employee_id},
            )
            return lookup
        if not isinstance(lookup, Ok):
            return lookup

        name = lookup.value.name
        if name is None:
            # upstream deletes by name; a nameless record cannot be addressed
            return NotFound()

        deleted = await self.upstream.delete_by_name(name)
        if not isinstance(deleted, Ok):
            return deleted
        if deleted.value:
            logger.info(
                f"Deleted employee by id: {employee_id} with name: {name}",
                extra={"operation": "delete_by_id", "employee_id": employee_id},
            )
            return Ok(name)
        logger.info(
            f"Delete failed; employee not removed for id: {employee_id}",
            extra={"operation": "delete_by_id", "employee_id": employee_id},
        )
        return NotFound()
