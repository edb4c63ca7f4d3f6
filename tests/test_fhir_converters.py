"""Tests for ExplanationOfBenefit to claim conversion."""

from __future__ import annotations

import json
import logging

import pytest

from samhsamatcher.core.errors import ClaimConversionError
from samhsamatcher.core.models import (
    CarrierClaim,
    DiagnosisEntry,
    InpatientClaim,
    LineItem,
    OtherClaim,
    OutpatientClaim,
    PackageCode,
    ProcedureEntry,
)
from samhsamatcher.core.types import ClaimType, CodingSystem
from samhsamatcher.fhir.converters import (
    EOB_TYPE_SYSTEM,
    ICD_9_SYSTEM,
    ICD_10_SYSTEM,
    bundle_to_claims,
    eob_claim_type,
    eob_to_claim,
    iter_bundle_eobs,
)


def _eob(claim_type: str, **extra):
    return {
        "resourceType": "ExplanationOfBenefit",
        "id": f"{claim_type.lower()}-1",
        "type": {"coding": [{"system": EOB_TYPE_SYSTEM, "code": claim_type}]},
        **extra,
    }


def _diagnosis(sequence, code, system=ICD_10_SYSTEM):
    return {
        "sequence": sequence,
        "diagnosisCodeableConcept": {"coding": [{"system": system, "code": code}]},
    }


class TestClaimType:
    @pytest.mark.parametrize("claim_type", list(ClaimType))
    def test_reads_eob_type(self, claim_type):
        assert eob_claim_type(_eob(claim_type.value)) is claim_type

    def test_ignores_other_type_systems(self):
        eob = {"type": {"coding": [{"system": "http://hl7.org/fhir/ex-claimtype", "code": "SNF"}]}}
        assert eob_claim_type(eob) is ClaimType.UNKNOWN

    def test_unrecognized_code(self):
        assert eob_claim_type(_eob("MEDICAID")) is ClaimType.UNKNOWN

    def test_lower_case_code(self):
        assert eob_claim_type(_eob("carrier")) is ClaimType.CARRIER


class TestSampleEobs:
    def test_carrier(self, sample_eob):
        claim = eob_to_claim(sample_eob(ClaimType.CARRIER))
        assert isinstance(claim, CarrierClaim)
        assert claim.id == "carrier-9991831999"
        assert [d.code for d in claim.diagnoses] == ["A02", "A05", "A52"]
        assert claim.line_items == (
            LineItem(sequence=1, service_code="92999"),
            LineItem(sequence=2, service_code="99213"),
        )

    def test_inpatient(self, sample_eob):
        claim = eob_to_claim(sample_eob(ClaimType.INPATIENT))
        assert isinstance(claim, InpatientClaim)
        assert claim.diagnoses[0] == DiagnosisEntry(
            system=CodingSystem.ICD10_DIAGNOSIS, code="R4444"
        )
        assert claim.procedures[0] == ProcedureEntry(
            system=CodingSystem.ICD10_PROCEDURE, code="BQ0HZZZ"
        )
        assert claim.package_code == PackageCode(drg_code="695")

    def test_pde(self, sample_eob):
        claim = eob_to_claim(sample_eob(ClaimType.PDE))
        assert isinstance(claim, OtherClaim)
        assert claim.claim_type is ClaimType.PDE


class TestLocations:
    def test_orders_by_sequence(self):
        eob = _eob("CARRIER", diagnosis=[_diagnosis(2, "B02"), _diagnosis(1, "A01")])
        assert [d.code for d in eob_to_claim(eob).diagnoses] == ["A01", "B02"]

    def test_icd_versions(self):
        eob = _eob(
            "CARRIER",
            diagnosis=[_diagnosis(1, "291.89", ICD_9_SYSTEM), _diagnosis(2, "F10.10")],
        )
        systems = [d.system for d in eob_to_claim(eob).diagnoses]
        assert systems == [CodingSystem.ICD9_DIAGNOSIS, CodingSystem.ICD10_DIAGNOSIS]

    def test_procedures_tagged_as_procedures(self):
        eob = _eob(
            "OUTPATIENT",
            procedure=[
                {
                    "sequence": 1,
                    "procedureCodeableConcept": {
                        "coding": [{"system": ICD_9_SYSTEM, "code": "94.45"}]
                    },
                }
            ],
        )
        claim = eob_to_claim(eob)
        assert isinstance(claim, OutpatientClaim)
        assert claim.procedures == (
            ProcedureEntry(system=CodingSystem.ICD9_PROCEDURE, code="94.45"),
        )

    def test_non_icd_diagnosis_keeps_its_position(self):
        eob = _eob(
            "CARRIER",
            diagnosis=[_diagnosis(1, "X", "http://example.org/other"), _diagnosis(2, "A01")],
        )
        assert eob_to_claim(eob).diagnoses == (
            DiagnosisEntry(),
            DiagnosisEntry(system=CodingSystem.ICD10_DIAGNOSIS, code="A01"),
        )

    def test_admitting_diagnosis_without_coding_keeps_index_zero(self, sample_eob):
        """A package-code-only admitting diagnosis still occupies the first position."""
        eob = sample_eob(ClaimType.INPATIENT)
        del eob["diagnosis"][0]["diagnosisCodeableConcept"]
        claim = eob_to_claim(eob)
        assert claim.diagnoses[0] == DiagnosisEntry()
        assert claim.diagnoses[1].code == "A40"
        assert claim.package_code == PackageCode(drg_code="695")

    def test_first_icd_coding_per_diagnosis(self):
        eob = _eob(
            "CARRIER",
            diagnosis=[
                {
                    "sequence": 1,
                    "diagnosisCodeableConcept": {
                        "coding": [
                            {"system": ICD_9_SYSTEM, "code": "291.89"},
                            {"system": ICD_10_SYSTEM, "code": "F10.10"},
                        ]
                    },
                }
            ],
        )
        assert eob_to_claim(eob).diagnoses == (
            DiagnosisEntry(system=CodingSystem.ICD9_DIAGNOSIS, code="291.89"),
        )

    def test_non_string_systems_ignored(self):
        eob = _eob(
            "CARRIER",
            diagnosis=[_diagnosis(1, "F10.10", ["http://hl7.org/fhir/sid/icd-10"])],
            item=[{"sequence": 1, "service": {"coding": [{"system": {}, "code": "4320F"}]}}],
        )
        claim = eob_to_claim(eob)
        assert claim.diagnoses == (DiagnosisEntry(),)
        assert claim.line_items == (LineItem(sequence=1, service_code=None),)

    def test_service_without_system(self):
        eob = _eob("DME", item=[{"sequence": 1, "service": {"coding": [{"code": "4320F"}]}}])
        assert eob_to_claim(eob).line_items == (LineItem(sequence=1, service_code="4320F"),)

    def test_item_without_service(self):
        eob = _eob("HHA", item=[{"sequence": 3}])
        assert eob_to_claim(eob).line_items == (LineItem(sequence=3, service_code=None),)

    def test_numeric_codes_become_strings(self):
        eob = _eob("CARRIER", item=[{"sequence": 1, "service": {"coding": [{"code": 99213}]}}])
        assert eob_to_claim(eob).line_items[0].service_code == "99213"

    def test_package_code_dropped_for_outpatient(self, sample_eob, caplog):
        eob = sample_eob(ClaimType.OUTPATIENT)
        eob["diagnosis"][0]["packageCode"] = {
            "coding": [
                {
                    "system": "https://bluebutton.cms.gov/resources/variables/clm_drg_cd",
                    "code": "522",
                }
            ]
        }
        with caplog.at_level(logging.DEBUG, logger="samhsamatcher.fhir.converters"):
            claim = eob_to_claim(eob)
        assert "package_code" not in type(claim).model_fields
        assert "Ignoring package_code" in caplog.text

    def test_malformed_sections_ignored(self):
        eob = _eob("SNF", diagnosis="bad", procedure=[None, 3], item={"sequence": 1})
        claim = eob_to_claim(eob)
        assert claim.diagnoses == ()
        assert claim.procedures == ()
        assert claim.line_items == ()


class TestResourceHandling:
    def test_rejects_other_resources(self):
        with pytest.raises(ClaimConversionError):
            eob_to_claim({"resourceType": "Patient"})

    def test_bundle(self, eobs_dir):
        bundle = json.loads((eobs_dir / "bundle.json").read_text(encoding="utf-8"))
        claims = bundle_to_claims(bundle)
        assert [c.claim_type for c in claims] == [
            ClaimType.CARRIER,
            ClaimType.OUTPATIENT,
            ClaimType.PDE,
        ]

    def test_single_eob_is_its_own_bundle(self, sample_eob):
        eob = sample_eob(ClaimType.SNF)
        assert list(iter_bundle_eobs(eob)) == [eob]

    def test_bundle_skips_other_entries(self):
        bundle = {
            "resourceType": "Bundle",
            "entry": [{"resource": {"resourceType": "Patient"}}, {"fullUrl": "x"}],
        }
        assert list(iter_bundle_eobs(bundle)) == []

    @pytest.mark.parametrize("resource", [[], "text", {"resourceType": "Patient"}])
    def test_unsupported_input(self, resource):
        with pytest.raises(ClaimConversionError):
            list(iter_bundle_eobs(resource))
