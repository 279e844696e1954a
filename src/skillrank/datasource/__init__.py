"""Candidate sources: where the ranked entities come from."""

from .base import BaseCandidateSource
from .factory import CandidateSourceFactory
from .providers.in_memory import InMemoryCandidateSource
from .providers.json_file import JsonFileCandidateSource

__all__ = [
    "BaseCandidateSource",
    "CandidateSourceFactory",
    "InMemoryCandidateSource",
    "JsonFileCandidateSource",
]
