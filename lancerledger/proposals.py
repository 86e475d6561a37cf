"""Proposal storage and the wire codec for proposal calls."""

from __future__ import annotations

from dataclasses import replace

from .jobs import _U32_LIMIT, _U128_LIMIT, _check_range, _require_length, _right_aligned, _u32
from .models import ContractError, ErrorCode, JobStatus, Proposal, ProposalStatus

MAX_PROPOSALS = 200

_PROPOSAL_TRANSITIONS = frozenset(
    {
        (ProposalStatus.SUBMITTED, ProposalStatus.ACCEPTED),
        (ProposalStatus.SUBMITTED, ProposalStatus.REJECTED),
    }
)


class ProposalBook:
    """Holds freelancers' proposals on the jobs of a job board."""

    def __init__(self, jobs, capacity=MAX_PROPOSALS):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.jobs = jobs
        self.capacity = capacity
        self._proposals: dict[int, Proposal] = {}
        self._next_id = 0

    def __len__(self):
        return len(self._proposals)

    def submit_proposal(self, job_id, freelancer_id, bid_amount):
        """Submit a bid on an open job and return the new proposal's id."""
        _check_range(freelancer_id, _U32_LIMIT, "freelancer id")
        _check_range(bid_amount, _U128_LIMIT, "bid amount")
        try:
            job = self.jobs.get_job(job_id)
        except ContractError:
            raise ContractError(ErrorCode.NOT_FOUND, f"job {job_id} not found") from None
        if job.status != JobStatus.OPEN:
            raise ContractError(ErrorCode.INVALID_OPERATION, f"job {job_id} is not open")
        if self._next_id >= self.capacity:
            raise ContractError(ErrorCode.STORAGE_FULL, "proposal storage is full")
        proposal = Proposal(
            id=self._next_id,
            job_id=job_id,
            freelancer_id=freelancer_id,
            bid_amount=bid_amount,
        )
        self._proposals[proposal.id] = proposal
        self._next_id += 1
        return proposal.id

    def get_proposal(self, proposal_id):
        """Return the proposal with the given id."""
        try:
            return self._proposals[proposal_id]
        except (KeyError, TypeError):
            raise ContractError(
                ErrorCode.NOT_FOUND, f"proposal {proposal_id} not found"
            ) from None

    def update_proposal_status(self, proposal_id, new_status):
        """Accept or reject a submitted proposal."""
        try:
            status = ProposalStatus(new_status)
        except ValueError:
            raise ContractError(
                ErrorCode.INVALID_INPUT, f"unknown proposal status {new_status!r}"
            ) from None
        proposal = self.get_proposal(proposal_id)
        if (proposal.status, status) not in _PROPOSAL_TRANSITIONS:
            raise ContractError(
                ErrorCode.INVALID_OPERATION,
                f"proposal {proposal_id} cannot go from {proposal.status.name} to {status.name}",
            )
        self._proposals[proposal_id] = replace(proposal, status=status)


def decode_submit_proposal_args(data):
    """Decode (job_id, freelancer_id, bid_amount): u32, u32, u128, big-endian."""
    _require_length(data, 4 + 4 + 16)
    return _u32(data, 0), _u32(data, 4), int.from_bytes(data[8:24], "big")


def decode_get_proposal_args(data):
    """Decode a proposal id (u32, big-endian)."""
    _require_length(data, 4)
    return _u32(data, 0)


def decode_update_proposal_status_args(data):
    """Decode (proposal_id, status byte)."""
    _require_length(data, 4 + 1)
    return _u32(data, 0), data[4]


def encode_proposal_id_result(proposal_id):
    """Encode a proposal id as a right-aligned 32-byte word."""
    return _right_aligned(proposal_id.to_bytes(4, "big"))


def encode_get_proposal_result(proposal):
    """Encode job id, freelancer id, bid and status as a right-aligned 32-byte word."""
    payload = (
        proposal.job_id.to_bytes(4, "big")
        + proposal.freelancer_id.to_bytes(4, "big")
        + proposal.bid_amount.to_bytes(16, "big")
        + bytes([int(proposal.status)])
    )
    return _right_aligned(payload)