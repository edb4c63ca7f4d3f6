"""Application settings and configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from samhsamatcher.core.types import CodingSystem


DEFAULT_CODE_FILES: dict[CodingSystem, str] = {
    CodingSystem.ICD9_DIAGNOSIS: "icd9_diagnosis.csv",
    CodingSystem.ICD9_PROCEDURE: "icd9_procedure.csv",
    CodingSystem.ICD10_DIAGNOSIS: "icd10_diagnosis.csv",
    CodingSystem.ICD10_PROCEDURE: "icd10_procedure.csv",
    CodingSystem.CPT_HCPCS: "cpt_hcpcs.csv",
    CodingSystem.DRG: "drg.csv",
}


class CodeSetSettings(BaseModel):
    """Protected code reference data configuration."""

    # None means the data files shipped with the package
    data_dir: Path | None = None
    files: dict[CodingSystem, str] = Field(default_factory=lambda: dict(DEFAULT_CODE_FILES))


class Settings(BaseSettings):
    """Application configuration.

    Settings are loaded from environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Reference data
    codes: CodeSetSettings = Field(default_factory=CodeSetSettings)

    # Logging
    log_level: str = "INFO"

    def __init__(self, **data: Any) -> None:
        """Initialize settings with environment variable overrides."""
        super().__init__(**data)
        self._load_env_overrides()

    def _load_env_overrides(self) -> None:
        """Load environment variable overrides for nested settings."""
        if data_dir := os.getenv("SAMHSA_CODES_DIR"):
            self.codes.data_dir = Path(data_dir)
        if level := os.getenv("LOG_LEVEL"):
            self.log_level = level.upper()
