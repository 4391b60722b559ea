"""Upstream Outcomes — tagged result values for every upstream-backed operation.

Invariants:
    - Exactly four variants: Ok, NotFound, RateLimited, UpstreamFailure
    - NotFound is a normal value, never an exception
    - RateLimited and UpstreamFailure pass through composing operations unchanged
    - Outcome values are immutable (frozen dataclasses)

Design Decisions:
    - Frozen dataclasses + Union alias over exceptions: the service layer composes
      results with plain isinstance checks, the boundary turns them into HTTP
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from employee_proxy.core.domain_types import OutcomeKind

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful upstream call carrying its value."""
    value: T
    kind: OutcomeKind = OutcomeKind.OK


@dataclass(frozen=True)
class NotFound:
    """Upstream reports the entity does not exist."""
    kind: OutcomeKind = OutcomeKind.NOT_FOUND


@dataclass(frozen=True)
class RateLimited:
    """Upstream answered 429. retry_after_seconds is None if the header was absent or invalid."""
    retry_after_seconds: int | None = None
    kind: OutcomeKind = OutcomeKind.RATE_LIMITED


@dataclass(frozen=True)
class UpstreamFailure:
    """Any other failure: non-success status, transport error, or malformed body."""
    reason: str
    status_code: int | None = None
    kind: OutcomeKind = OutcomeKind.UPSTREAM_FAILURE


Failure = Union[NotFound, RateLimited, UpstreamFailure]
Outcome = Union[Ok[T], NotFound, RateLimited, UpstreamFailure]
