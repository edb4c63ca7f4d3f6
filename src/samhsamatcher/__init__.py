"""samhsamatcher - SAMHSA protected code detection for Medicare claims.

This package decides whether a claim carries a code protected under
substance-abuse and mental-health confidentiality rules:
- Claim models per claim type (carrier, DME, HHA, hospice, outpatient,
  inpatient, SNF)
- Protected code reference sets for ICD-9, ICD-10, CPT/HCPCS and DRG
- A per-claim-type extraction policy and the matcher itself
- Conversion from FHIR ExplanationOfBenefit resources
"""

from __future__ import annotations

from samhsamatcher.codes.reference import ProtectedCodeSet, load_default_code_set
from samhsamatcher.config.settings import Settings
from samhsamatcher.core.models import Claim, ClaimBase
from samhsamatcher.core.types import ClaimLocation, ClaimType, CodingSystem
from samhsamatcher.fhir.converters import bundle_to_claims, eob_to_claim
from samhsamatcher.matching.matcher import SamhsaMatcher


__version__ = "0.1.0"

__all__ = [
    "Claim",
    "ClaimBase",
    "ClaimLocation",
    "ClaimType",
    "CodingSystem",
    "ProtectedCodeSet",
    "SamhsaMatcher",
    "Settings",
    "bundle_to_claims",
    "eob_to_claim",
    "load_default_code_set",
]
