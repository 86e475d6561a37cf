"""Agreement storage and the wire codec for agreement calls."""

from __future__ import annotations

from dataclasses import replace

from .jobs import _require_length, _right_aligned, _u32
from .models import (
    Agreement,
    AgreementStatus,
    ContractError,
    ErrorCode,
    JobStatus,
    ProposalStatus,
)

MAX_AGREEMENTS = 100


class AgreementBook:
    """Holds agreements made from accepted proposals."""

    def __init__(self, jobs, proposals, capacity=MAX_AGREEMENTS):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.jobs = jobs
        self.proposals = proposals
        self.capacity = capacity
        self._agreements: dict[int, Agreement] = {}
        self._next_id = 0

    def __len__(self):
        return len(self._agreements)

    def create_agreement_from_proposal(self, proposal_id):
        """Create an agreement from an accepted proposal and start its job."""
        try:
            proposal = self.proposals.get_proposal(proposal_id)
        except ContractError:
            raise ContractError(
                ErrorCode.NOT_FOUND, f"proposal {proposal_id} not found"
            ) from None
        if proposal.status != ProposalStatus.ACCEPTED:
            raise ContractError(
                ErrorCode.INVALID_OPERATION, f"proposal {proposal_id} is not accepted"
            )
        try:
            job = self.jobs.get_job(proposal.job_id)
        except ContractError:
            raise ContractError(
                ErrorCode.NOT_FOUND, f"job {proposal.job_id} not found"
            ) from None
        if job.status != JobStatus.OPEN:
            raise ContractError(
                ErrorCode.INVALID_OPERATION, f"job {job.id} is not open"
            )
        if self._next_id >= self.capacity:
            raise ContractError(ErrorCode.STORAGE_FULL, "agreement storage is full")
        agreement = Agreement(
            id=self._next_id,
            job_id=proposal.job_id,
            client_id=job.client_id,
            freelancer_id=proposal.freelancer_id,
            total_amount=proposal.bid_amount,
        )
        self._agreements[agreement.id] = agreement
        self._next_id += 1
        self.jobs.update_job_status(job.id, JobStatus.IN_PROGRESS)
        return agreement.id

    def get_agreement(self, agreement_id):
        """Return the agreement with the given id."""
        try:
            return self._agreements[agreement_id]
        except (KeyError, TypeError):
            raise ContractError(
                ErrorCode.NOT_FOUND, f"agreement {agreement_id} not found"
            ) from None

    def update_agreement_status(self, agreement_id, new_status):
        """Complete or dispute an active agreement."""
        try:
            status = AgreementStatus(new_status)
        except ValueError:
            raise ContractError(
                ErrorCode.INVALID_INPUT, f"unknown agreement status {new_status!r}"
            ) from None
        agreement = self.get_agreement(agreement_id)
        transition = (agreement.status, status)
        if transition == (AgreementStatus.ACTIVE, AgreementStatus.COMPLETED):
            self.jobs.update_job_status(agreement.job_id, JobStatus.COMPLETED)
        elif transition != (AgreementStatus.ACTIVE, AgreementStatus.DISPUTED):
            raise ContractError(
                ErrorCode.INVALID_OPERATION,
                f"agreement {agreement_id} cannot go from "
                f"{agreement.status.name} to {status.name}",
            )
        self._agreements[agreement_id] = replace(agreement, status=status)


def decode_create_agreement_args(data):
    """Decode a proposal id (u32, big-endian)."""
    _require_length(data, 4)
    return _u32(data, 0)


def decode_get_agreement_args(data):
    """Decode an agreement id (u32, big-endian)."""
    _require_length(data, 4)
    return _u32(data, 0)


def decode_update_agreement_status_args(data):
    """Decode (agreement_id, status byte)."""
    _require_length(data, 4 + 1)
    return _u32(data, 0), data[4]


def encode_agreement_id_result(agreement_id):
    """Encode an agreement id as a right-aligned 32-byte word."""
    return _right_aligned(agreement_id.to_bytes(4, "big"))


def encode_get_agreement_result(agreement):
    """Encode an agreement's ids, amount and status as a right-aligned 32-byte word."""
    payload = (
        agreement.job_id.to_bytes(4, "big")
        + agreement.client_id.to_bytes(4, "big")
        + agreement.freelancer_id.to_bytes(4, "big")
        + agreement.total_amount.to_bytes(16, "big")
        + bytes([int(agreement.status)])
    )
    return _right_aligned(payload)