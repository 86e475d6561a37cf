import dataclasses

import pytest

from lancerledger.models import (
    Agreement,
    AgreementStatus,
    ContractError,
    ErrorCode,
    Job,
    JobStatus,
    Proposal,
    ProposalStatus,
)


def test_contract_error_keeps_code_and_message():
    err = ContractError(ErrorCode.NOT_FOUND, "job 3 not found")
    assert err.code is ErrorCode.NOT_FOUND
    assert err.message == "job 3 not found"
    assert str(err) == "job 3 not found"


def test_contract_error_accepts_plain_int_code():
    err = ContractError(int(ErrorCode.STORAGE_FULL), "full")
    assert err.code is ErrorCode.STORAGE_FULL


def test_contract_error_default_message_names_code():
    err = ContractError(ErrorCode.INVALID_INPUT)
    assert "invalid input" in str(err)


def test_contract_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        ContractError(0, "no such code")


def test_contract_error_is_catchable_as_exception():
    err = ContractError(ErrorCode.UNAUTHORIZED, "denied")
    assert err.code is ErrorCode.UNAUTHORIZED
    assert err.message == "denied"
    with pytest.raises(ContractError, match="denied") as info:
        raise err
    assert info.value.code is ErrorCode.UNAUTHORIZED


@pytest.mark.parametrize(
    "enum_cls, bad",
    [(JobStatus, 4), (ProposalStatus, 3), (AgreementStatus, 3)],
)
def test_status_out_of_range_is_rejected(enum_cls, bad):
    with pytest.raises(ValueError):
        enum_cls(bad)


@pytest.mark.parametrize("enum_cls", [JobStatus, ProposalStatus, AgreementStatus])
def test_status_round_trips_through_int(enum_cls):
    for member in enum_cls:
        assert enum_cls(int(member)) is member


def test_error_codes_one_through_six_build_errors():
    codes = [ContractError(value).code for value in range(1, 7)]
    assert [int(code) for code in codes] == [1, 2, 3, 4, 5, 6]
    assert codes[0] is ErrorCode.INVALID_OPERATION
    assert codes[-1] is ErrorCode.UNAUTHORIZED
    with pytest.raises(ValueError):
        ContractError(7)


def test_records_default_to_initial_status():
    assert Job(id=0, client_id=1, budget=5).status is JobStatus.OPEN
    assert Proposal(0, 0, 2, 9).status is ProposalStatus.SUBMITTED
    assert Agreement(0, 0, 1, 2, 9).status is AgreementStatus.ACTIVE


def test_records_are_immutable():
    job = Job(id=0, client_id=1, budget=5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        job.status = JobStatus.COMPLETED
    assert job.status is JobStatus.OPEN


def test_replace_changes_only_status():
    job = Job(id=4, client_id=8, budget=100)
    moved = dataclasses.replace(job, status=JobStatus.IN_PROGRESS)
    assert moved.status is JobStatus.IN_PROGRESS
    assert (moved.id, moved.client_id, moved.budget) == (job.id, job.client_id, job.budget)
    assert job.status is JobStatus.OPEN