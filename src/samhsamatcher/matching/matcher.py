"""SAMHSA protected-code matcher."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from samhsamatcher.codes.reference import load_default_code_set
from samhsamatcher.matching.extractors import iter_candidates
from samhsamatcher.matching.policy import policy_for


if TYPE_CHECKING:
    from collections.abc import Iterator

    from samhsamatcher.codes.reference import ProtectedCodeSet
    from samhsamatcher.core.models import ClaimBase
    from samhsamatcher.matching.extractors import CandidateCode

logger = logging.getLogger(__name__)


class SamhsaMatcher:
    """Decides whether a claim carries a SAMHSA-protected code.

    A ``True`` result means the claim must not be served as-is. The
    matcher holds no per-call state and can be shared between threads.
    """

    def __init__(self, code_set: ProtectedCodeSet | None = None) -> None:
        if code_set is None:
            code_set = load_default_code_set()
        self.code_set = code_set

    def is_protected(self, claim: ClaimBase) -> bool:
        """Return True on the first protected code found on ``claim``."""
        for candidate in self._protected_candidates(claim):
            logger.debug(
                "Claim %s matched %s %s at %s[%d]",
                claim.id,
                candidate.system.value,
                candidate.code,
                candidate.location.value,
                candidate.index,
            )
            return True
        return False

    def find_matches(self, claim: ClaimBase) -> list[CandidateCode]:
        """Return every protected code on ``claim``, for audit and reporting."""
        return list(self._protected_candidates(claim))

    def __call__(self, claim: ClaimBase) -> bool:
        return self.is_protected(claim)

    def _protected_candidates(self, claim: ClaimBase) -> Iterator[CandidateCode]:
        claim_type = getattr(claim, "claim_type", None)
        policy = policy_for(claim_type)
        if not policy.has_locations:
            logger.debug("Claim %s of type %s has no checked locations", claim.id, claim_type)
            return
        for candidate in iter_candidates(claim, policy):
            if self.code_set.contains(candidate.system, candidate.code):
                yield candidate
