"""
SkillRank Error Classification.

This module provides the exception hierarchy raised by the ranking engine
and its collaborators.

Error Categories:
-----------------
1. Numeric Errors: The inputs are well-formed but the metric is undefined
   - All-zero (degenerate) vectors

2. Source Errors: Candidate data could not be obtained
   - Missing or unreadable candidate file
   - Malformed candidate records

3. Configuration Errors: Settings that cannot be honored
   - Unknown candidate source type
   - Invalid policy or numeric settings

Usage:
------
    from skillrank.errors import DegenerateVectorError, SkillRankError

    try:
        results = ranker.rank(query, candidates).results
    except DegenerateVectorError as e:
        # Client sent (or matched against) an all-zero vector
        raise HTTPException(status_code=422, detail=e.to_dict())
    except SkillRankError as e:
        logger.error(f"Ranking failed: {e}")
"""

from typing import Any


class SkillRankError(Exception):
    """
    Base exception for all SkillRank errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.original_error:
            base += f" | Caused by: {type(self.original_error).__name__}: {self.original_error}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


# =============================================================================
# Numeric Errors
# =============================================================================

class DegenerateVectorError(SkillRankError):
    """
    Raised when a compared vector has a zero sum of squares.

    A zero vector has no direction, so cosine similarity is undefined.
    This is recoverable: the caller decides whether to skip the candidate
    or reject the request.
    """

    def __init__(
        self,
        message: str = "vector is all-zero",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


# =============================================================================
# Collaborator Errors
# =============================================================================

class CandidateSourceError(SkillRankError):
    """Raised when the candidate list cannot be read or parsed."""
    pass


class ConfigurationError(SkillRankError):
    """
    Raised when there's a configuration problem.

    Common causes:
    - Unknown candidate source type
    - Invalid degenerate-vector policy
    - Non-numeric value for a numeric setting
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)
