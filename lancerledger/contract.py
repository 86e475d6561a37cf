"""Call dispatch: selector-prefixed call data in, a 32-byte word or a revert out."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .agreements import (
    AgreementBook,
    decode_create_agreement_args,
    decode_get_agreement_args,
    decode_update_agreement_status_args,
    encode_agreement_id_result,
    encode_get_agreement_result,
)
from .jobs import (
    JobBoard,
    decode_create_job_args,
    decode_get_job_args,
    decode_update_job_status_args,
    encode_error,
    encode_get_job_result,
    encode_job_id_result,
    encode_simple_result,
)
from .models import ContractError, ErrorCode
from .proposals import (
    ProposalBook,
    decode_get_proposal_args,
    decode_submit_proposal_args,
    decode_update_proposal_status_args,
    encode_get_proposal_result,
    encode_proposal_id_result,
)

MAX_CALL_DATA = 256
SELECTOR_SIZE = 4


class Selector(IntEnum):
    """Four-byte function selectors accepted by the contract."""

    CREATE_JOB = 0x00000001
    GET_JOB = 0x00000002
    UPDATE_JOB_STATUS = 0x00000003
    SUBMIT_PROPOSAL = 0x00000010
    GET_PROPOSAL = 0x00000011
    UPDATE_PROPOSAL_STATUS = 0x00000012
    CREATE_AGREEMENT = 0x00000020
    GET_AGREEMENT = 0x00000021
    UPDATE_AGREEMENT_STATUS = 0x00000022


@dataclass(frozen=True)
class CallResult:
    """Outcome of a call: whether it reverted, and the bytes it returned."""

    reverted: bool
    output: bytes = b""

    @property
    def ok(self):
        return not self.reverted


class Contract:
    """The ledger contract: jobs, proposals and agreements behind one call entry."""

    def __init__(self):
        self.deploy()
        self._handlers = {
            Selector.CREATE_JOB: self._create_job,
            Selector.GET_JOB: self._get_job,
            Selector.UPDATE_JOB_STATUS: self._update_job_status,
            Selector.SUBMIT_PROPOSAL: self._submit_proposal,
            Selector.GET_PROPOSAL: self._get_proposal,
            Selector.UPDATE_PROPOSAL_STATUS: self._update_proposal_status,
            Selector.CREATE_AGREEMENT: self._create_agreement,
            Selector.GET_AGREEMENT: self._get_agreement,
            Selector.UPDATE_AGREEMENT_STATUS: self._update_agreement_status,
        }

    def deploy(self):
        """Set up empty storage."""
        self.jobs = JobBoard()
        self.proposals = ProposalBook(self.jobs)
        self.agreements = AgreementBook(self.jobs, self.proposals)

    def call(self, call_data):
        """Dispatch call data to the function its selector names.

        Only the first 256 bytes are read. A word whose last byte is non-zero is
        taken as an error report: a known error code is returned alone with a
        revert, anything else reverts with no data.
        """
        data = bytes(call_data[:MAX_CALL_DATA])
        if len(data) < SELECTOR_SIZE:
            return CallResult(reverted=True)
        try:
            selector = Selector(int.from_bytes(data[:SELECTOR_SIZE], "big"))
        except ValueError:
            return CallResult(reverted=True)
        try:
            word = self._handlers[selector](data[SELECTOR_SIZE:])
        except ContractError as error:
            word = encode_error(error)
        return _finish(word)

    def _create_job(self, args):
        client_id, budget = decode_create_job_args(args)
        return encode_job_id_result(self.jobs.create_job(client_id, budget))

    def _get_job(self, args):
        return encode_get_job_result(self.jobs.get_job(decode_get_job_args(args)))

    def _update_job_status(self, args):
        job_id, status = decode_update_job_status_args(args)
        self.jobs.update_job_status(job_id, status)
        return encode_simple_result()

    def _submit_proposal(self, args):
        job_id, freelancer_id, bid_amount = decode_submit_proposal_args(args)
        proposal_id = self.proposals.submit_proposal(job_id, freelancer_id, bid_amount)
        return encode_proposal_id_result(proposal_id)

    def _get_proposal(self, args):
        proposal = self.proposals.get_proposal(decode_get_proposal_args(args))
        return encode_get_proposal_result(proposal)

    def _update_proposal_status(self, args):
        proposal_id, status = decode_update_proposal_status_args(args)
        self.proposals.update_proposal_status(proposal_id, status)
        return encode_simple_result()

    def _create_agreement(self, args):
        proposal_id = decode_create_agreement_args(args)
        agreement_id = self.agreements.create_agreement_from_proposal(proposal_id)
        return encode_agreement_id_result(agreement_id)

    def _get_agreement(self, args):
        agreement = self.agreements.get_agreement(decode_get_agreement_args(args))
        return encode_get_agreement_result(agreement)

    def _update_agreement_status(self, args):
        agreement_id, status = decode_update_agreement_status_args(args)
        self.agreements.update_agreement_status(agreement_id, status)
        return encode_simple_result()


def _finish(word):
    last = word[-1]
    if last == 0:
        return CallResult(reverted=False, output=word)
    if ErrorCode.INVALID_OPERATION <= last <= ErrorCode.UNAUTHORIZED:
        return CallResult(reverted=True, output=bytes([last]))
    return CallResult(reverted=True)