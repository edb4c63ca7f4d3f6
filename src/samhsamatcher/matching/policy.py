"""Per-claim-type extraction policies.

``POLICIES`` has exactly one row per ``ClaimType``. Adding a claim type
means adding a row here.
"""

from __future__ import annotations

from dataclasses import dataclass

from samhsamatcher.core.types import ClaimType


@dataclass(frozen=True)
class ExtractionPolicy:
    """Which claim locations are checked for protected codes."""

    diagnoses: bool = False
    skip_first_diagnosis: bool = False
    procedures: bool = False
    services: bool = False
    package_code: bool = False

    @property
    def has_locations(self) -> bool:
        return self.diagnoses or self.procedures or self.services or self.package_code


NO_LOCATIONS = ExtractionPolicy()

_LINE_ITEM = ExtractionPolicy(diagnoses=True, services=True)
_OUTPATIENT = ExtractionPolicy(diagnoses=True, procedures=True, services=True)
# First diagnosis on a stay claim is the admitting diagnosis
_INSTITUTIONAL_STAY = ExtractionPolicy(
    diagnoses=True,
    skip_first_diagnosis=True,
    procedures=True,
    services=True,
    package_code=True,
)

POLICIES: dict[ClaimType, ExtractionPolicy] = {
    ClaimType.CARRIER: _LINE_ITEM,
    ClaimType.DME: _LINE_ITEM,
    ClaimType.HHA: _LINE_ITEM,
    ClaimType.HOSPICE: _LINE_ITEM,
    ClaimType.OUTPATIENT: _OUTPATIENT,
    ClaimType.INPATIENT: _INSTITUTIONAL_STAY,
    ClaimType.SNF: _INSTITUTIONAL_STAY,
    ClaimType.PDE: NO_LOCATIONS,
    ClaimType.UNKNOWN: NO_LOCATIONS,
}


def policy_for(claim_type: ClaimType | str | None) -> ExtractionPolicy:
    """Look up the extraction policy for a claim type.

    Unrecognized claim types get ``NO_LOCATIONS``.
    """
    try:
        return POLICIES.get(ClaimType(claim_type), NO_LOCATIONS)
    except ValueError:
        return NO_LOCATIONS
