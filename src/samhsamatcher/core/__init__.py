"""Core module - Claim models and shared types."""

from __future__ import annotations

from samhsamatcher.core.errors import ClaimConversionError, CodeSetError, SamhsaMatcherError
from samhsamatcher.core.models import (
    CLAIM_MODELS,
    CarrierClaim,
    Claim,
    ClaimBase,
    DiagnosisEntry,
    DmeClaim,
    HhaClaim,
    HospiceClaim,
    InpatientClaim,
    InstitutionalStayClaim,
    LineItem,
    LineItemClaim,
    OtherClaim,
    OutpatientClaim,
    PackageCode,
    ProcedureEntry,
    SnfClaim,
    build_claim,
)
from samhsamatcher.core.types import ClaimLocation, ClaimType, CodingSystem


__all__ = [
    "CLAIM_MODELS",
    # Models
    "CarrierClaim",
    "Claim",
    "ClaimBase",
    "ClaimConversionError",
    # Types
    "ClaimLocation",
    "ClaimType",
    "CodeSetError",
    "CodingSystem",
    "DiagnosisEntry",
    "DmeClaim",
    "HhaClaim",
    "HospiceClaim",
    "InpatientClaim",
    "InstitutionalStayClaim",
    "LineItem",
    "LineItemClaim",
    "OtherClaim",
    "OutpatientClaim",
    "PackageCode",
    "ProcedureEntry",
    # Errors
    "SamhsaMatcherError",
    "SnfClaim",
    "build_claim",
]
