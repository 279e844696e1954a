"""Utility functions for SkillRank."""

from .performance import timed
from .similarity import cosine_similarity

__all__ = [
    "cosine_similarity",
    "timed",
]
