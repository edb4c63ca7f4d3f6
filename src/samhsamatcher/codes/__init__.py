"""Protected code reference data and normalization."""

from __future__ import annotations

from samhsamatcher.codes.normalize import (
    normalize_code,
    normalize_drg_code,
    normalize_hcpcs_code,
    normalize_icd_code,
)
from samhsamatcher.codes.reference import (
    ProtectedCodeSet,
    load_default_code_set,
    read_code_file,
)


__all__ = [
    "ProtectedCodeSet",
    "load_default_code_set",
    "normalize_code",
    "normalize_drg_code",
    "normalize_hcpcs_code",
    "normalize_icd_code",
    "read_code_file",
]
