"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the presentation and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResultKind(Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    REJECTED = "REJECTED"  # failed validation, nothing was sent
    IGNORED = "IGNORED"  # another submission is still in flight


@dataclass(frozen=True)
class SubmissionResult:
    """Output: how a single ``submit_order`` call ended."""

    kind: ResultKind
    message: str = ""
    order_id: str | None = None

    @staticmethod
    def success(message: str, order_id: str) -> SubmissionResult:
        return SubmissionResult(ResultKind.SUCCESS, message, order_id)

    @staticmethod
    def failure(message: str) -> SubmissionResult:
        return SubmissionResult(ResultKind.FAILURE, message)

    @staticmethod
    def rejected(notice: str) -> SubmissionResult:
        return SubmissionResult(ResultKind.REJECTED, notice)

    @staticmethod
    def ignored() -> SubmissionResult:
        return SubmissionResult(ResultKind.IGNORED)

    @property
    def ok(self) -> bool:
        return self.kind == ResultKind.SUCCESS


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$79.99"
    line_total: str


@dataclass(frozen=True)
class SessionView:
    """Output: everything the presentation layer renders, read at one instant."""

    lines: list[CartLineDTO]
    total: str
    count: int
    unit_count: int
    address: dict[str, str]
    missing_fields: list[str]
    status: str
    status_message: str
    is_submitting: bool
