"""
cep_weather.domain.results

Failure taxonomy and tagged pipeline results.

Responsibilities:
- Define every failure category with its HTTP status and fixed message.
- Provide `Success` / `Failure` result variants returned by service pipelines.
- Define `UpstreamError`, raised by HTTP clients for any downstream fault.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class FailureKind(enum.Enum):
    INVALID_FORMAT = (422, "invalid zipcode")
    NOT_FOUND = (404, "can not find zipcode")
    UPSTREAM_FAILURE = (502, "bad gateway")
    MISCONFIGURED_DEPENDENCY = (500, "weather api key missing")
    METHOD_NOT_ALLOWED = (405, "method not allowed")

    @property
    def status_code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    kind: FailureKind
    # Internal detail for logs/spans only; never sent to the caller.
    detail: str = ""


class UpstreamError(Exception):
    """
    A downstream HTTP call failed: transport error, non-success status or an
    undecodable body.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# --- Module Notes -----------------------------------------------------------
# Services return `Success | Failure`; routers map `Failure.kind` to a plain-text
# response. Control flow never depends on comparing error strings.
