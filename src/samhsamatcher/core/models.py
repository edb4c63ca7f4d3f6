"""Claim data models.

Claims are a discriminated union over ``claim_type``. Each variant only
declares the locations its shape actually has, so an institutional-only
field such as ``package_code`` cannot be set on a professional claim.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from samhsamatcher.core.types import (  # noqa: TC001 - Pydantic needs at runtime
    ClaimType,
    CodingSystem,
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class DiagnosisEntry(_Frozen):
    """A diagnosis coding on a claim."""
    system: CodingSystem | None = None
    code: str | None = None


class ProcedureEntry(_Frozen):
    """A procedure coding on a claim."""
    system: CodingSystem | None = None
    code: str | None = None


class LineItem(_Frozen):
    """A claim line, optionally carrying a CPT/HCPCS service code."""
    sequence: int = 1
    service_code: str | None = None


class PackageCode(_Frozen):
    """Institutional package code, optionally carrying a DRG."""
    drg_code: str | None = None


class ClaimBase(_Frozen):
    id: str = ""


class LineItemClaim(ClaimBase):
    """Shared shape of claims billed line by line."""
    diagnoses: tuple[DiagnosisEntry, ...] = ()
    line_items: tuple[LineItem, ...] = ()


class CarrierClaim(LineItemClaim):
    """Professional (Part B carrier) claim."""
    claim_type: Literal[ClaimType.CARRIER] = ClaimType.CARRIER


class DmeClaim(LineItemClaim):
    """Durable medical equipment claim."""
    claim_type: Literal[ClaimType.DME] = ClaimType.DME


class HhaClaim(LineItemClaim):
    """Home health agency claim."""
    claim_type: Literal[ClaimType.HHA] = ClaimType.HHA


class HospiceClaim(LineItemClaim):
    claim_type: Literal[ClaimType.HOSPICE] = ClaimType.HOSPICE


class OutpatientClaim(LineItemClaim):
    procedures: tuple[ProcedureEntry, ...] = ()
    claim_type: Literal[ClaimType.OUTPATIENT] = ClaimType.OUTPATIENT


class InstitutionalStayClaim(LineItemClaim):
    """Shared shape of claims for an institutional stay.

    The first diagnosis on these claims is the admitting diagnosis.
    """
    procedures: tuple[ProcedureEntry, ...] = ()
    package_code: PackageCode | None = None


class InpatientClaim(InstitutionalStayClaim):
    claim_type: Literal[ClaimType.INPATIENT] = ClaimType.INPATIENT


class SnfClaim(InstitutionalStayClaim):
    """Skilled nursing facility claim."""
    claim_type: Literal[ClaimType.SNF] = ClaimType.SNF


class OtherClaim(ClaimBase):
    """A claim of a type with no protected-code locations (e.g. Part D)."""
    claim_type: Literal[ClaimType.PDE, ClaimType.UNKNOWN] = ClaimType.UNKNOWN


Claim = Annotated[
    Union[
        CarrierClaim,
        DmeClaim,
        HhaClaim,
        HospiceClaim,
        OutpatientClaim,
        InpatientClaim,
        SnfClaim,
        OtherClaim,
    ],
    Field(discriminator="claim_type"),
]

CLAIM_MODELS: dict[ClaimType, type[ClaimBase]] = {
    ClaimType.CARRIER: CarrierClaim,
    ClaimType.DME: DmeClaim,
    ClaimType.HHA: HhaClaim,
    ClaimType.HOSPICE: HospiceClaim,
    ClaimType.OUTPATIENT: OutpatientClaim,
    ClaimType.INPATIENT: InpatientClaim,
    ClaimType.SNF: SnfClaim,
    ClaimType.PDE: OtherClaim,
    ClaimType.UNKNOWN: OtherClaim,
}

claim_adapter: TypeAdapter[Claim] = TypeAdapter(Claim)


def build_claim(data: dict) -> ClaimBase:
    """Validate a plain dict into the claim variant named by its ``claim_type``."""
    return claim_adapter.validate_python(data)
