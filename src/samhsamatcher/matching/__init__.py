"""Matching module - Claim-type dispatch, extraction and the matcher."""

from __future__ import annotations

from samhsamatcher.matching.extractors import (
    CandidateCode,
    extract_diagnoses,
    extract_package_code,
    extract_procedures,
    extract_services,
    iter_candidates,
)
from samhsamatcher.matching.matcher import SamhsaMatcher
from samhsamatcher.matching.policy import NO_LOCATIONS, POLICIES, ExtractionPolicy, policy_for


__all__ = [
    "NO_LOCATIONS",
    "POLICIES",
    "CandidateCode",
    "ExtractionPolicy",
    "SamhsaMatcher",
    "extract_diagnoses",
    "extract_package_code",
    "extract_procedures",
    "extract_services",
    "iter_candidates",
    "policy_for",
]
