"""Candidate code extraction from claims.

Each extractor is a generator over one claim location, gated by the
claim's ``ExtractionPolicy``. Calling an extractor again restarts it.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import TYPE_CHECKING

from samhsamatcher.codes.normalize import normalize_code
from samhsamatcher.core.types import ClaimLocation, CodingSystem


if TYPE_CHECKING:
    from collections.abc import Iterator

    from samhsamatcher.core.models import ClaimBase
    from samhsamatcher.matching.policy import ExtractionPolicy


@dataclass(frozen=True)
class CandidateCode:
    """A normalized code found at one location on a claim."""

    location: ClaimLocation
    index: int
    system: CodingSystem
    code: str


# The location decides diagnosis vs. procedure; the entry only tells us
# the ICD revision.
_AS_DIAGNOSIS = {
    CodingSystem.ICD9_DIAGNOSIS: CodingSystem.ICD9_DIAGNOSIS,
    CodingSystem.ICD9_PROCEDURE: CodingSystem.ICD9_DIAGNOSIS,
    CodingSystem.ICD10_DIAGNOSIS: CodingSystem.ICD10_DIAGNOSIS,
    CodingSystem.ICD10_PROCEDURE: CodingSystem.ICD10_DIAGNOSIS,
}
_AS_PROCEDURE = {
    CodingSystem.ICD9_DIAGNOSIS: CodingSystem.ICD9_PROCEDURE,
    CodingSystem.ICD9_PROCEDURE: CodingSystem.ICD9_PROCEDURE,
    CodingSystem.ICD10_DIAGNOSIS: CodingSystem.ICD10_PROCEDURE,
    CodingSystem.ICD10_PROCEDURE: CodingSystem.ICD10_PROCEDURE,
}


def _candidate(
    location: ClaimLocation, index: int, system: CodingSystem | None, code: str | None
) -> CandidateCode | None:
    if system is None:
        return None
    normalized = normalize_code(system, code)
    if not normalized:
        return None
    return CandidateCode(location, index, system, normalized)


def extract_diagnoses(claim: ClaimBase, policy: ExtractionPolicy) -> Iterator[CandidateCode]:
    if not policy.diagnoses:
        return
    start = 1 if policy.skip_first_diagnosis else 0
    diagnoses = getattr(claim, "diagnoses", ())
    for index in range(start, len(diagnoses)):
        entry = diagnoses[index]
        system = _AS_DIAGNOSIS.get(entry.system) if entry.system else None
        if candidate := _candidate(ClaimLocation.DIAGNOSIS, index, system, entry.code):
            yield candidate


def extract_procedures(claim: ClaimBase, policy: ExtractionPolicy) -> Iterator[CandidateCode]:
    if not policy.procedures:
        return
    for index, entry in enumerate(getattr(claim, "procedures", ())):
        system = _AS_PROCEDURE.get(entry.system) if entry.system else None
        if candidate := _candidate(ClaimLocation.PROCEDURE, index, system, entry.code):
            yield candidate


def extract_services(claim: ClaimBase, policy: ExtractionPolicy) -> Iterator[CandidateCode]:
    if not policy.services:
        return
    for index, item in enumerate(getattr(claim, "line_items", ())):
        if item.service_code is None:
            continue
        candidate = _candidate(
            ClaimLocation.SERVICE, index, CodingSystem.CPT_HCPCS, item.service_code
        )
        if candidate:
            yield candidate


def extract_package_code(
    claim: ClaimBase, policy: ExtractionPolicy
) -> Iterator[CandidateCode]:
    if not policy.package_code:
        return
    package_code = getattr(claim, "package_code", None)
    if package_code is None:
        return
    if candidate := _candidate(
        ClaimLocation.PACKAGE_CODE, 0, CodingSystem.DRG, package_code.drg_code
    ):
        yield candidate


EXTRACTORS = (extract_diagnoses, extract_procedures, extract_services, extract_package_code)


def iter_candidates(claim: ClaimBase, policy: ExtractionPolicy) -> Iterator[CandidateCode]:
    """Yield candidates in diagnosis, procedure, service, package code order."""
    return chain.from_iterable(extract(claim, policy) for extract in EXTRACTORS)
