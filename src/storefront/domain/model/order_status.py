"""Outcome of the latest checkout attempt and the submission state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(Enum):
    IDLE = "IDLE"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


@dataclass(frozen=True)
class OrderStatus:
    """What the customer is told about their last order.

    Overwritten by every submission that reaches the network; left alone
    by rejected or ignored attempts.
    """

    kind: OutcomeKind = OutcomeKind.IDLE
    message: str = ""

    @staticmethod
    def idle() -> OrderStatus:
        return OrderStatus()

    @staticmethod
    def success(message: str) -> OrderStatus:
        return OrderStatus(OutcomeKind.SUCCESS, message)

    @staticmethod
    def failure(message: str) -> OrderStatus:
        return OrderStatus(OutcomeKind.FAILURE, message)

    @property
    def is_success(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.kind == OutcomeKind.FAILURE


class SubmissionPhase(Enum):
    """IDLE -> SUBMITTING -> RESOLVED, once per attempt that passes validation."""

    IDLE = "IDLE"
    SUBMITTING = "SUBMITTING"
    RESOLVED = "RESOLVED"
