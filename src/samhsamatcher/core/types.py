"""Core type definitions and enums."""

from __future__ import annotations

from enum import Enum


class ClaimType(str, Enum):
    """Claim types, keyed by the Blue Button ``eob-type`` codes."""

    CARRIER = "CARRIER"
    DME = "DME"
    HHA = "HHA"
    HOSPICE = "HOSPICE"
    INPATIENT = "INPATIENT"
    OUTPATIENT = "OUTPATIENT"
    SNF = "SNF"
    PDE = "PDE"
    UNKNOWN = "UNKNOWN"


class CodingSystem(str, Enum):
    """Coding systems that carry protected codes."""

    ICD9_DIAGNOSIS = "icd9_diagnosis"
    ICD9_PROCEDURE = "icd9_procedure"
    ICD10_DIAGNOSIS = "icd10_diagnosis"
    ICD10_PROCEDURE = "icd10_procedure"
    CPT_HCPCS = "cpt_hcpcs"
    DRG = "drg"

    @property
    def is_icd(self) -> bool:
        return self in ICD_SYSTEMS

    @property
    def icd_version(self) -> int | None:
        if self in (CodingSystem.ICD9_DIAGNOSIS, CodingSystem.ICD9_PROCEDURE):
            return 9
        if self in (CodingSystem.ICD10_DIAGNOSIS, CodingSystem.ICD10_PROCEDURE):
            return 10
        return None


ICD_SYSTEMS = frozenset(
    {
        CodingSystem.ICD9_DIAGNOSIS,
        CodingSystem.ICD9_PROCEDURE,
        CodingSystem.ICD10_DIAGNOSIS,
        CodingSystem.ICD10_PROCEDURE,
    }
)


class ClaimLocation(str, Enum):
    """Places on a claim where a protected code may appear."""

    DIAGNOSIS = "diagnosis"
    PROCEDURE = "procedure"
    SERVICE = "service"
    PACKAGE_CODE = "package_code"
