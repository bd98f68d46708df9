"""
Explicit success/failure values for pipeline stages.

Each stage of the planning and booking paths returns either ``Ok(value)`` or
``Failure(kind, detail)`` instead of raising, so the switch to the
deterministic fallback is a visible branch in the orchestrator.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class FailureKind(str, Enum):
    upstream_unavailable = "upstream_unavailable"
    parse_failure = "parse_failure"
    validation_gap = "validation_gap"
    timeout = "timeout"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    detail: str = ""

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.detail}" if self.detail else self.kind.value


Result = Union[Ok[T], Failure]


def attempt(
    fn: Callable[[], T], kind: FailureKind = FailureKind.upstream_unavailable
) -> Result[T]:
    """Run ``fn`` and convert any exception into a ``Failure`` of ``kind``."""
    try:
        return Ok(fn())
    except TimeoutError as exc:
        return Failure(FailureKind.timeout, str(exc) or "timed out")
    except Exception as exc:  # noqa: BLE001
        return Failure(kind, f"{type(exc).__name__}: {exc}")


def then(result: Result[T], fn: Callable[[T], Result[U]]) -> Result[U]:
    """Feed an ``Ok`` value into the next stage; pass a ``Failure`` through."""
    if isinstance(result, Failure):
        return result
    return fn(result.value)


def with_fallback(result: Result[T], fallback: Callable[[Failure], T]) -> T:
    """Unwrap ``result``, or build the deterministic substitute on failure."""
    if isinstance(result, Failure):
        logger.warning("Falling back to deterministic output: %s", result)
        return fallback(result)
    return result.value
