"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from samhsamatcher.codes.reference import ProtectedCodeSet
from samhsamatcher.core.types import ClaimType, CodingSystem
from samhsamatcher.matching.matcher import SamhsaMatcher


SAMPLE_EOB_FILES = {
    ClaimType.CARRIER: "carrier.json",
    ClaimType.DME: "dme.json",
    ClaimType.HHA: "hha.json",
    ClaimType.HOSPICE: "hospice.json",
    ClaimType.INPATIENT: "inpatient.json",
    ClaimType.OUTPATIENT: "outpatient.json",
    ClaimType.SNF: "snf.json",
    ClaimType.PDE: "pde.json",
}


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def eobs_dir(project_root: Path) -> Path:
    """Get sample ExplanationOfBenefit JSON directory."""
    return project_root / "tests" / "fixtures" / "eobs"


@pytest.fixture
def sample_eob(eobs_dir: Path) -> Callable[[ClaimType], dict[str, Any]]:
    """Load a fresh copy of the sample EOB for a claim type."""

    def _load(claim_type: ClaimType) -> dict[str, Any]:
        return json.loads((eobs_dir / SAMPLE_EOB_FILES[claim_type]).read_text(encoding="utf-8"))

    return _load


@pytest.fixture(scope="session")
def code_set() -> ProtectedCodeSet:
    """The protected code set shipped with the package."""
    return ProtectedCodeSet.packaged()


@pytest.fixture(scope="session")
def matcher(code_set: ProtectedCodeSet) -> SamhsaMatcher:
    return SamhsaMatcher(code_set)


@pytest.fixture
def synthetic_code_set() -> ProtectedCodeSet:
    """A small code set with one code per system."""
    return ProtectedCodeSet.from_mapping(
        {
            CodingSystem.ICD9_DIAGNOSIS: ["111.1"],
            CodingSystem.ICD9_PROCEDURE: ["22.2"],
            CodingSystem.ICD10_DIAGNOSIS: ["X33.3"],
            CodingSystem.ICD10_PROCEDURE: ["YY4YYYY"],
            CodingSystem.CPT_HCPCS: ["5555Z"],
            CodingSystem.DRG: ["666"],
        }
    )


@pytest.fixture
def codes_dir(tmp_path: Path) -> Path:
    """Directory of reference CSV files with one code per system."""
    data_dir = tmp_path / "codes"
    data_dir.mkdir()
    rows = {
        "icd9_diagnosis.csv": "291.89",
        "icd9_procedure.csv": "94.45",
        "icd10_diagnosis.csv": "F10.10",
        "icd10_procedure.csv": "HZ2ZZZZ",
        "cpt_hcpcs.csv": "4320F",
        "drg.csv": "522",
    }
    for filename, code in rows.items():
        (data_dir / filename).write_text(f"code,description\n{code},test code\n", encoding="utf-8")
    return data_dir
