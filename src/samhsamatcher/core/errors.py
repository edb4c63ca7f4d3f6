"""Exceptions raised outside of classification."""

from __future__ import annotations


class SamhsaMatcherError(Exception):
    """Base class for package errors."""


class CodeSetError(SamhsaMatcherError):
    """Protected code reference data could not be loaded."""


class ClaimConversionError(SamhsaMatcherError):
    """Input is not a resource that can be read as a claim."""
