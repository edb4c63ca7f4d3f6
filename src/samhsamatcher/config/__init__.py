"""Configuration module."""

from __future__ import annotations

from samhsamatcher.config.settings import DEFAULT_CODE_FILES, CodeSetSettings, Settings


__all__ = ["DEFAULT_CODE_FILES", "CodeSetSettings", "Settings"]
