# lancerledger

A small in-memory ledger for freelance work. It keeps track of three things:

- **Jobs**, which clients post with a budget.
- **Proposals**, which freelancers submit as bids on open jobs.
- **Agreements**, which are made from accepted proposals.

Every record has a status, and a status can only change along the allowed
transitions. Each store has a fixed capacity. The whole ledger can also be
driven through a compact binary call interface. A call is a 4-byte selector
followed by big-endian arguments. A successful reply is a 32-byte word.

## Installation

```
pip install lancerledger
```

To run the tests:

```
pip install "lancerledger[test]"
pytest
```

## Modules

- `lancerledger.models`: the records `Job`, `Proposal` and `Agreement`
  (frozen dataclasses), the statuses `JobStatus`, `ProposalStatus` and
  `AgreementStatus`, the `ErrorCode` enum and the `ContractError` exception.
- `lancerledger.jobs`: `JobBoard` and the codec functions for job calls.
- `lancerledger.proposals`: `ProposalBook` and the codec for proposal calls.
- `lancerledger.agreements`: `AgreementBook` and the codec for agreement calls.
- `lancerledger.contract`: `Contract`, `Selector` and `CallResult`.

## Using the stores directly

```python
from lancerledger.jobs import JobBoard
from lancerledger.proposals import ProposalBook
from lancerledger.agreements import AgreementBook
from lancerledger.models import JobStatus, ProposalStatus, AgreementStatus, ContractError

jobs = JobBoard(capacity=100)
proposals = ProposalBook(jobs, capacity=200)
agreements = AgreementBook(jobs, proposals, capacity=100)

job_id = jobs.create_job(client_id=7, budget=5_000)
proposal_id = proposals.submit_proposal(job_id, freelancer_id=42, bid_amount=4_500)
proposals.update_proposal_status(proposal_id, ProposalStatus.ACCEPTED)

agreement_id = agreements.create_agreement_from_proposal(proposal_id)
assert jobs.get_job(job_id).status is JobStatus.IN_PROGRESS

agreements.update_agreement_status(agreement_id, AgreementStatus.COMPLETED)
assert jobs.get_job(job_id).status is JobStatus.COMPLETED
```

The default capacities are 100 jobs, 200 proposals and 100 agreements. Ids are
numbered from 0 and never reused; once as many ids as the capacity have been
issued, further creation raises `STORAGE_FULL`. `len()` of a store gives the
number of records it holds. The `get_*` methods return the record itself.

Client and freelancer ids must fit in an unsigned 32-bit integer, and budgets
and bids in an unsigned 128-bit integer; anything else raises `INVALID_INPUT`.
A status given as a plain integer is accepted if it names a known status, and
raises `INVALID_INPUT` otherwise.

A failed operation raises `ContractError`. Its `code` is an `ErrorCode`:
`INVALID_OPERATION`, `NOT_FOUND`, `ALREADY_EXISTS`, `STORAGE_FULL`,
`INVALID_INPUT` or `UNAUTHORIZED`, and its `message` describes the failure.
For example, a disallowed status transition raises `INVALID_OPERATION`:

```python
try:
    jobs.update_job_status(job_id, JobStatus.OPEN)
except ContractError as exc:
    print(exc.code, exc.message)
```

A proposal can only be submitted on an open job. An agreement can only be made
from an accepted proposal whose job is still open; making it moves the job to
`IN_PROGRESS`, and completing the agreement moves the job to `COMPLETED`.

### Allowed transitions

| Record    | From        | To                       |
|-----------|-------------|--------------------------|
| Job       | Open        | InProgress, Cancelled    |
| Job       | InProgress  | Completed, Cancelled     |
| Proposal  | Submitted   | Accepted, Rejected       |
| Agreement | Active      | Completed, Disputed      |

## Using the binary call interface

```python
from lancerledger.contract import Contract, Selector

contract = Contract()

call = Selector.CREATE_JOB.to_bytes(4, "big") + (7).to_bytes(4, "big") + (5_000).to_bytes(16, "big")
result = contract.call(call)
print(result.reverted, result.output.hex())
```

A new `Contract` starts with empty storage; `deploy()` replaces its stores with
empty ones. Only the first 256 bytes of call data are read.

Every call returns a `CallResult` with `reverted`, `output` and `ok` (the
opposite of `reverted`). A successful call returns the 32-byte word, with its
values right-aligned. A failed call is reverted: its output is then the single
error-code byte, or empty when the call data is shorter than a selector or the
selector is unknown. Arguments that are too short revert with `INVALID_INPUT`.

| Selector                   | Value  | Arguments                              | Result                                      |
|----------------------------|--------|----------------------------------------|---------------------------------------------|
| `CREATE_JOB`               | `0x01` | client id (u32), budget (u128)         | job id (u32)                                |
| `GET_JOB`                  | `0x02` | job id (u32)                           | client id, budget, status                   |
| `UPDATE_JOB_STATUS`        | `0x03` | job id (u32), status (u8)              | all-zero word                               |
| `SUBMIT_PROPOSAL`          | `0x10` | job id, freelancer id (u32), bid (u128)| proposal id (u32)                           |
| `GET_PROPOSAL`             | `0x11` | proposal id (u32)                      | job id, freelancer id, bid, status          |
| `UPDATE_PROPOSAL_STATUS`   | `0x12` | proposal id (u32), status (u8)         | all-zero word                               |
| `CREATE_AGREEMENT`         | `0x20` | proposal id (u32)                      | agreement id (u32)                          |
| `GET_AGREEMENT`            | `0x21` | agreement id (u32)                     | job, client, freelancer ids, amount, status |
| `UPDATE_AGREEMENT_STATUS`  | `0x22` | agreement id (u32), status (u8)        | all-zero word                               |

The codec functions in each module (`decode_*_args`, `encode_*_result`,
`encode_simple_result` and `encode_error` in `lancerledger.jobs`) can also be
used on their own.

## What the package does not do

- Storage lives in memory only; nothing is saved between runs.
- There are no access checks: any caller may change any record, and the
  `UNAUTHORIZED` and `ALREADY_EXISTS` codes are never raised.
- No payments are moved; budgets and bids are recorded numbers.
- There is no command-line tool or server; the ledger is used from Python.