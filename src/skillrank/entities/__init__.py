"""Core data entities."""

from .candidate import Candidate, RankedResult

__all__ = ["Candidate", "RankedResult"]
