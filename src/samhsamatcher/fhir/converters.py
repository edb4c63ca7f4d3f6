"""Converters from FHIR STU3 ExplanationOfBenefit resources to claims."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from samhsamatcher.core.errors import ClaimConversionError
from samhsamatcher.core.models import CLAIM_MODELS, ClaimBase
from samhsamatcher.core.types import ClaimType, CodingSystem


if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

EOB_TYPE_SYSTEM = "https://bluebutton.cms.gov/resources/codesystem/eob-type"
ICD_9_SYSTEM = "http://hl7.org/fhir/sid/icd-9-cm"
ICD_10_SYSTEM = "http://hl7.org/fhir/sid/icd-10"
ICD_10_PCS_SYSTEM = "http://www.cms.gov/Medicare/Coding/ICD10"
HCPCS_SYSTEM = "https://bluebutton.cms.gov/resources/codesystem/hcpcs"
CPT_SYSTEM = "http://www.ama-assn.org/go/cpt"
DRG_SYSTEM = "https://bluebutton.cms.gov/resources/variables/clm_drg_cd"

_DIAGNOSIS_SYSTEMS = {
    ICD_9_SYSTEM: CodingSystem.ICD9_DIAGNOSIS,
    ICD_10_SYSTEM: CodingSystem.ICD10_DIAGNOSIS,
}
_PROCEDURE_SYSTEMS = {
    ICD_9_SYSTEM: CodingSystem.ICD9_PROCEDURE,
    ICD_10_SYSTEM: CodingSystem.ICD10_PROCEDURE,
    ICD_10_PCS_SYSTEM: CodingSystem.ICD10_PROCEDURE,
}
_SERVICE_SYSTEMS = {HCPCS_SYSTEM, CPT_SYSTEM}


def _codings(concept: Any) -> list[dict[str, Any]]:
    if not isinstance(concept, dict):
        return []
    return [c for c in concept.get("coding") or [] if isinstance(c, dict)]


def _system(coding: dict[str, Any]) -> str | None:
    system = coding.get("system")
    return system if isinstance(system, str) else None


def _code(coding: dict[str, Any]) -> str | None:
    code = coding.get("code")
    return None if code is None else str(code)


def _by_sequence(entries: Any) -> list[dict[str, Any]]:
    """Order FHIR backbone elements by ``sequence``, falling back to document order."""
    if not isinstance(entries, list):
        return []
    ordered = [
        (e["sequence"] if isinstance(e.get("sequence"), int) else position, position, e)
        for position, e in enumerate((e for e in entries if isinstance(e, dict)), start=1)
    ]
    return [e for _, _, e in sorted(ordered, key=lambda t: t[:2])]


def eob_claim_type(eob: dict[str, Any]) -> ClaimType:
    """Read the claim type from ``ExplanationOfBenefit.type``."""
    for coding in _codings(eob.get("type")):
        if _system(coding) == EOB_TYPE_SYSTEM:
            try:
                return ClaimType(str(coding.get("code", "")).upper())
            except ValueError:
                logger.debug("Unrecognized EOB type code: %s", coding.get("code"))
    return ClaimType.UNKNOWN


def _icd_entry(concept: Any, systems: dict[str, CodingSystem]) -> dict[str, Any]:
    """First ICD coding of a concept, or an empty entry that keeps its position."""
    for coding in _codings(concept):
        system = systems.get(_system(coding) or "")
        if system is not None:
            return {"system": system, "code": _code(coding)}
    return {"system": None, "code": None}


def _diagnoses(eob: dict[str, Any]) -> list[dict[str, Any]]:
    # One entry per diagnosis element; index 0 stays the admitting diagnosis
    return [
        _icd_entry(d.get("diagnosisCodeableConcept"), _DIAGNOSIS_SYSTEMS)
        for d in _by_sequence(eob.get("diagnosis"))
    ]


def _procedures(eob: dict[str, Any]) -> list[dict[str, Any]]:
    return [
        _icd_entry(p.get("procedureCodeableConcept"), _PROCEDURE_SYSTEMS)
        for p in _by_sequence(eob.get("procedure"))
    ]


def _line_items(eob: dict[str, Any]) -> list[dict[str, Any]]:
    items = []
    for position, item in enumerate(_by_sequence(eob.get("item")), start=1):
        service_code = next(
            (
                _code(c)
                for c in _codings(item.get("service"))
                if (c.get("system") is None or _system(c) in _SERVICE_SYSTEMS) and c.get("code")
            ),
            None,
        )
        sequence = item.get("sequence")
        items.append(
            {
                "sequence": sequence if isinstance(sequence, int) else position,
                "service_code": service_code,
            }
        )
    return items


def _package_code(eob: dict[str, Any]) -> dict[str, Any] | None:
    for diagnosis in _by_sequence(eob.get("diagnosis")):
        for coding in _codings(diagnosis.get("packageCode")):
            if _system(coding) == DRG_SYSTEM and coding.get("code"):
                return {"drg_code": _code(coding)}
    return None


def eob_to_claim(eob: dict[str, Any]) -> ClaimBase:
    """Convert an ExplanationOfBenefit JSON resource to a claim.

    Locations the claim's variant does not carry are dropped.

    Args:
        eob: Parsed ``ExplanationOfBenefit`` resource.

    Returns:
        The claim variant for the EOB's type.

    Raises:
        ClaimConversionError: If ``eob`` is not an ExplanationOfBenefit.
    """
    if not isinstance(eob, dict) or eob.get("resourceType") != "ExplanationOfBenefit":
        raise ClaimConversionError("Resource is not an ExplanationOfBenefit")

    claim_type = eob_claim_type(eob)
    model = CLAIM_MODELS[claim_type]
    fields = {
        "id": str(eob.get("id") or ""),
        "claim_type": claim_type,
        "diagnoses": _diagnoses(eob),
        "procedures": _procedures(eob),
        "line_items": _line_items(eob),
        "package_code": _package_code(eob),
    }

    dropped = [k for k, v in fields.items() if v and k not in model.model_fields]
    if dropped:
        logger.debug(
            "Ignoring %s on %s claim %s", ", ".join(dropped), claim_type.value, fields["id"]
        )
    return model.model_validate({k: v for k, v in fields.items() if k in model.model_fields})


def iter_bundle_eobs(resource: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """Yield the ExplanationOfBenefit resources in a resource or Bundle.

    Raises:
        ClaimConversionError: If ``resource`` is neither an EOB nor a Bundle.
    """
    if not isinstance(resource, dict):
        raise ClaimConversionError("Expected a JSON object")
    resource_type = resource.get("resourceType")
    if resource_type == "ExplanationOfBenefit":
        yield resource
    elif resource_type == "Bundle":
        for entry in resource.get("entry") or []:
            inner = entry.get("resource") if isinstance(entry, dict) else None
            if isinstance(inner, dict) and inner.get("resourceType") == "ExplanationOfBenefit":
                yield inner
    else:
        raise ClaimConversionError(f"Unsupported resourceType: {resource_type}")


def bundle_to_claims(resource: dict[str, Any]) -> list[ClaimBase]:
    return [eob_to_claim(eob) for eob in iter_bundle_eobs(resource)]
