"""FHIR module - Reading claims from ExplanationOfBenefit resources."""

from __future__ import annotations

from samhsamatcher.fhir.converters import (
    bundle_to_claims,
    eob_claim_type,
    eob_to_claim,
    iter_bundle_eobs,
)


__all__ = ["bundle_to_claims", "eob_claim_type", "eob_to_claim", "iter_bundle_eobs"]
