"""Job storage and the wire codec for job calls."""

from __future__ import annotations

from dataclasses import replace

from .models import ContractError, ErrorCode, Job, JobStatus

MAX_JOBS = 100
WORD_SIZE = 32

_U32_LIMIT = 1 << 32
_U128_LIMIT = 1 << 128

_JOB_TRANSITIONS = frozenset(
    {
        (JobStatus.OPEN, JobStatus.IN_PROGRESS),
        (JobStatus.OPEN, JobStatus.CANCELLED),
        (JobStatus.IN_PROGRESS, JobStatus.COMPLETED),
        (JobStatus.IN_PROGRESS, JobStatus.CANCELLED),
    }
)


def _check_range(value, limit, what):
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < limit:
        raise ContractError(ErrorCode.INVALID_INPUT, f"{what} out of range: {value!r}")


class JobBoard:
    """Holds posted jobs, up to a fixed number of them."""

    def __init__(self, capacity=MAX_JOBS):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._jobs: dict[int, Job] = {}
        self._next_id = 0

    def __len__(self):
        return len(self._jobs)

    def create_job(self, client_id, budget):
        """Post a new open job and return its id."""
        _check_range(client_id, _U32_LIMIT, "client id")
        _check_range(budget, _U128_LIMIT, "budget")
        if self._next_id >= self.capacity:
            raise ContractError(ErrorCode.STORAGE_FULL, "job storage is full")
        job = Job(id=self._next_id, client_id=client_id, budget=budget)
        self._jobs[job.id] = job
        self._next_id += 1
        return job.id

    def get_job(self, job_id):
        """Return the job with the given id."""
        try:
            return self._jobs[job_id]
        except (KeyError, TypeError):
            raise ContractError(ErrorCode.NOT_FOUND, f"job {job_id} not found") from None

    def update_job_status(self, job_id, new_status):
        """Move a job to a new status, if the transition is allowed."""
        try:
            status = JobStatus(new_status)
        except ValueError:
            raise ContractError(
                ErrorCode.INVALID_INPUT, f"unknown job status {new_status!r}"
            ) from None
        job = self.get_job(job_id)
        if (job.status, status) not in _JOB_TRANSITIONS:
            raise ContractError(
                ErrorCode.INVALID_OPERATION,
                f"job {job_id} cannot go from {job.status.name} to {status.name}",
            )
        self._jobs[job_id] = replace(job, status=status)


def _require_length(data, length):
    if len(data) < length:
        raise ContractError(
            ErrorCode.INVALID_INPUT, f"expected at least {length} bytes, got {len(data)}"
        )


def _u32(data, offset):
    return int.from_bytes(data[offset:offset + 4], "big")


def decode_create_job_args(data):
    """Decode (client_id, budget) from a u32 and a u128, big-endian."""
    _require_length(data, 4 + 16)
    return _u32(data, 0), int.from_bytes(data[4:20], "big")


def decode_get_job_args(data):
    """Decode a job id (u32, big-endian)."""
    _require_length(data, 4)
    return _u32(data, 0)


def decode_update_job_status_args(data):
    """Decode (job_id, status byte)."""
    _require_length(data, 4 + 1)
    return _u32(data, 0), data[4]


def _right_aligned(payload):
    return bytes(payload).rjust(WORD_SIZE, b"\x00")


def encode_job_id_result(job_id):
    """Encode a job id as a right-aligned 32-byte word."""
    return _right_aligned(job_id.to_bytes(4, "big"))


def encode_get_job_result(job):
    """Encode client id, budget and status as a right-aligned 32-byte word."""
    payload = (
        job.client_id.to_bytes(4, "big")
        + job.budget.to_bytes(16, "big")
        + bytes([int(job.status)])
    )
    return _right_aligned(payload)


def encode_simple_result():
    """Encode a bare success: an all-zero word."""
    return bytes(WORD_SIZE)


def encode_error(error):
    """Encode an error: an all-zero word whose last byte is the error code."""
    code = error.code if isinstance(error, ContractError) else ErrorCode(error)
    return _right_aligned(bytes([int(code)]))