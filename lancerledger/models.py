"""Records, statuses and errors shared across the ledger."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class JobStatus(IntEnum):
    """Lifecycle of a posted job."""

    OPEN = 0
    IN_PROGRESS = 1
    COMPLETED = 2
    CANCELLED = 3


class ProposalStatus(IntEnum):
    """Lifecycle of a freelancer's bid on a job."""

    SUBMITTED = 0
    ACCEPTED = 1
    REJECTED = 2


class AgreementStatus(IntEnum):
    """Lifecycle of an agreement between a client and a freelancer."""

    ACTIVE = 0
    COMPLETED = 1
    DISPUTED = 2


class ErrorCode(IntEnum):
    """Numeric error codes reported on the wire."""

    INVALID_OPERATION = 1
    NOT_FOUND = 2
    ALREADY_EXISTS = 3
    STORAGE_FULL = 4
    INVALID_INPUT = 5
    UNAUTHORIZED = 6


class ContractError(Exception):
    """A failed ledger operation, carrying its wire error code."""

    def __init__(self, code, message=None):
        self.code = ErrorCode(code)
        self.message = message or self.code.name.replace("_", " ").lower()
        super().__init__(self.message)


@dataclass(frozen=True)
class Job:
    """A job posted by a client with a budget."""

    id: int
    client_id: int
    budget: int
    status: JobStatus = JobStatus.OPEN


@dataclass(frozen=True)
class Proposal:
    """A freelancer's bid on a job."""

    id: int
    job_id: int
    freelancer_id: int
    bid_amount: int
    status: ProposalStatus = ProposalStatus.SUBMITTED


@dataclass(frozen=True)
class Agreement:
    """A binding agreement created from an accepted proposal."""

    id: int
    job_id: int
    client_id: int
    freelancer_id: int
    total_amount: int
    status: AgreementStatus = AgreementStatus.ACTIVE