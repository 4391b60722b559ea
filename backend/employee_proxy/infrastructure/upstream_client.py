"""Upstream Employee Client — one HTTP call per logical operation, classified into outcomes.

Invariants:
    - Rate limits (429): RateLimited carrying int(Retry-After) when it parses, else None
    - 429 takes priority over every other classification
    - 404 on single-entity lookup: NotFound (a value, not a failure)
    - Any other non-2xx, transport error or malformed body: UpstreamFailure
    - No retries, no caching — every call hits the upstream exactly once
    - The httpx.AsyncClient is injected; this class never creates or closes it

Design Decisions:
    - Outcome values over exceptions: callers compose results without try/except
    - build_http_client() centralizes pool limits and timeouts from Settings
"""

import logging
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from employee_proxy.config import Settings
from employee_proxy.core.outcomes import (
    Failure, NotFound, Ok, Outcome, RateLimited, UpstreamFailure,
)
from employee_proxy.schemas.employee import (
    DeleteEmployeeRequest, Envelope, UpstreamEmployee,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the pooled `httpx.AsyncClient` shared by all requests."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            settings.upstream_read_timeout_seconds,
            connect=settings.upstream_connect_timeout_seconds,
            pool=settings.upstream_pool_timeout_seconds,
        ),
        limits=httpx.Limits(
            max_connections=settings.upstream_max_connections,
            max_keepalive_connections=settings.upstream_max_keepalive_connections,
        ),
        headers={"Accept": "application/json"},
    )


def parse_retry_after(value: str | None) -> int | None:
    """Retry-After as integer seconds; None if absent or not an integer."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class UpstreamEmployeeClient:
    """Adapter over the upstream employee service's REST API."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    async def list_all(self) -> Outcome[list[UpstreamEmployee]]:
        """GET {base}. A missing body or null data is an empty list."""
        response = await self._send("GET", self.base_url, operation="list_all")
        if not isinstance(response, httpx.Response):
            return response
        envelope = self._parse(
            response, Envelope[list[UpstreamEmployee]], operation="list_all",
        )
        if not isinstance(envelope, Envelope):
            return envelope
        employees = envelope.data or []
        logger.debug(
            "Fetched employees from upstream",
            extra={"operation": "list_all", "count": len(employees)},
        )
        return Ok(employees)

    async def get_one(self, employee_id: str) -> Outcome[UpstreamEmployee]:
        """GET {base}/{id}. Upstream 404 or null data is NotFound."""
        response = await self._send(
            "GET", self._entity_url(employee_id),
            operation="get_one", not_found_is_empty=True,
        )
        if not isinstance(response, httpx.Response):
            if isinstance(response, NotFound):
                logger.info(
                    f"Employee not found by id: {employee_id}",
                    extra={"operation": "get_one", "employee_id": employee_id},
                )
            return response
        envelope = self._parse(
            response, Envelope[UpstreamEmployee], operation="get_one",
        )
        if not isinstance(envelope, Envelope):
            return envelope
        if envelope.data is None:
            return NotFound()
        return Ok(envelope.data)

    async def delete_by_name(self, name: str) -> Outcome[bool]:
        """DELETE {base} with body {"name": name}. Missing data means False."""
        response = await self._send(
            "DELETE", self.base_url,
            operation="delete_by_name",
            json=DeleteEmployeeRequest(name=name).model_dump(),
        )
        if not isinstance(response, httpx.Response):
            return response
        envelope = self._parse(
            response, Envelope[bool], operation="delete_by_name",
        )
        if not isinstance(envelope, Envelope):
            return envelope
        return Ok(bool(envelope.data))

    async def create(self, payload: dict) -> Outcome[UpstreamEmployee | None]:
        """POST {base}. Ok(None) when the envelope carries no entity."""
        response = await self._send(
            "POST", self.base_url, operation="create", json=payload,
        )
        if not isinstance(response, httpx.Response):
            return response
        envelope = self._parse(
            response, Envelope[UpstreamEmployee], operation="create",
        )
        if not isinstance(envelope, Envelope):
            return envelope
        return Ok(envelope.data)

    def _entity_url(self, employee_id: str) -> str:
        return f"{self.base_url}/{quote(employee_id, safe='')}"

    async def _send(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        not_found_is_empty: bool = False,
        json: dict | None = None,
    ) -> httpx.Response | Failure:
        """Issue one request and classify the status. Returns the response on 2xx."""
        logger.debug(
            f"Upstream {method} {url}", extra={"operation": operation},
        )
        try:
            response = await self.http_client.request(method, url, json=json)
        except httpx.TimeoutException as e:
            logger.warning(
                f"Upstream timeout: {e}", extra={"operation": operation},
            )
            return UpstreamFailure("upstream timed out")
        except httpx.HTTPError as e:
            logger.warning(
                f"Upstream transport error: {e}", extra={"operation": operation},
            )
            return UpstreamFailure(f"transport error: {type(e).__name__}")

        status_code = response.status_code
        if status_code == httpx.codes.TOO_MANY_REQUESTS:
            retry_after = parse_retry_after(response.headers.get("Retry-After"))
            logger.warning(
                "Upstream rate limit hit",
                extra={
                    "operation": operation,
                    "upstream_status": status_code,
                    "retry_after_seconds": retry_after,
                },
            )
            return RateLimited(retry_after)
        if status_code == httpx.codes.NOT_FOUND and not_found_is_empty:
            return NotFound()
        if not response.is_success:
            logger.warning(
                f"Upstream {method} failed with {status_code}",
                extra={"operation": operation, "upstream_status": status_code},
            )
            return UpstreamFailure(
                f"unexpected status {status_code}", status_code,
            )
        return response

    def _parse(
        self, response: httpx.Response, envelope_type: type[E], *, operation: str,
    ) -> E | UpstreamFailure:
        """Decode the envelope. An empty body is an envelope without data."""
        if not response.content.strip():
            return envelope_type()
        try:
            return envelope_type.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                f"Malformed upstream body: {e.error_count()} error(s)",
                extra={
                    "operation": operation,
                    "upstream_status": response.status_code,
                },
            )
            return UpstreamFailure(
                "malformed upstream response", response.status_code,
            )
