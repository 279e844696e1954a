from .in_memory import InMemoryCandidateSource
from .json_file import JsonFileCandidateSource

__all__ = ["InMemoryCandidateSource", "JsonFileCandidateSource"]
