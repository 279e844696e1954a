"""
SkillRank - cosine-similarity ranking of candidates against a skill profile.

The engine is pure: it takes a query vector and a list of candidates and
returns them ordered from most to least similar. Where the candidates come
from and how results are served is up to the caller (see ``web``).
"""

__version__ = "0.1.0"

# Entities
from .entities import Candidate, RankedResult

# Errors
from .errors import (
    CandidateSourceError,
    ConfigurationError,
    DegenerateVectorError,
    SkillRankError,
)

# Ranking engine
from .ranking import CandidateRanker, DegeneratePolicy, RankingOutcome, rank_candidates

# Candidate sources
from .datasource import (
    BaseCandidateSource,
    CandidateSourceFactory,
    InMemoryCandidateSource,
    JsonFileCandidateSource,
)

# Utilities
from .utils import cosine_similarity, timed

__all__ = [
    # Version
    "__version__",
    # Entities
    "Candidate",
    "RankedResult",
    # Errors
    "SkillRankError",
    "DegenerateVectorError",
    "CandidateSourceError",
    "ConfigurationError",
    # Ranking
    "CandidateRanker",
    "DegeneratePolicy",
    "RankingOutcome",
    "rank_candidates",
    # Sources
    "BaseCandidateSource",
    "CandidateSourceFactory",
    "InMemoryCandidateSource",
    "JsonFileCandidateSource",
    # Utilities
    "cosine_similarity",
    "timed",
]
