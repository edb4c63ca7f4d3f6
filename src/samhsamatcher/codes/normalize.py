"""Canonical forms for code lookup.

Claim data and the reference data disagree on casing, whitespace and
ICD decimal points. Every code is run through ``normalize_code`` on both
sides before a membership test.
"""

from __future__ import annotations

import re

from samhsamatcher.core.types import CodingSystem


_DRG_LABEL = re.compile(r"^(?:MS-)?DRG\s*", re.IGNORECASE)


def normalize_icd_code(code: str) -> str:
    """ICD-9/ICD-10 codes: ``" 291.89 "`` -> ``"29189"``."""
    return code.strip().replace(".", "").upper()


def normalize_hcpcs_code(code: str) -> str:
    return code.strip().upper()


def normalize_drg_code(code: str) -> str:
    """DRG codes: ``"MS-DRG 22"`` -> ``"022"``."""
    code = _DRG_LABEL.sub("", code.strip()).strip().upper()
    if code.isdigit() and len(code) < 3:
        code = code.zfill(3)
    return code


_NORMALIZERS = {
    CodingSystem.ICD9_DIAGNOSIS: normalize_icd_code,
    CodingSystem.ICD9_PROCEDURE: normalize_icd_code,
    CodingSystem.ICD10_DIAGNOSIS: normalize_icd_code,
    CodingSystem.ICD10_PROCEDURE: normalize_icd_code,
    CodingSystem.CPT_HCPCS: normalize_hcpcs_code,
    CodingSystem.DRG: normalize_drg_code,
}


def normalize_code(system: CodingSystem, code: str | None) -> str:
    """Return the lookup form of ``code`` for ``system``.

    Args:
        system: Coding system the code belongs to.
        code: Raw code as found on a claim or in reference data.

    Returns:
        Normalized code, or an empty string when there is no code.
    """
    if not code:
        return ""
    return _NORMALIZERS[system](code)
