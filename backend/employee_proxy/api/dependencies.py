"""Route Dependencies — per-request access to the service built at startup.

Invariants:
    - The upstream client lives on app.state (created and closed by the lifespan)
    - A fresh EmployeeProxyService wraps it per request; the service holds no state
"""

from fastapi import Depends, Request

from employee_proxy.infrastructure.upstream_client import UpstreamEmployeeClient
from employee_proxy.services.employee_proxy import EmployeeProxyService


def get_upstream_client(request: Request) -> UpstreamEmployeeClient:
    """FastAPI dependency for the shared upstream client."""
    upstream = getattr(request.app.state, "upstream_client", None)
    if upstream is None:
        raise RuntimeError("Upstream client not initialized")
    return upstream


def get_employee_service(
    upstream: UpstreamEmployeeClient = Depends(get_upstream_client),
) -> EmployeeProxyService:
    """FastAPI dependency for the employee proxy service."""
    return EmployeeProxyService(upstream)
