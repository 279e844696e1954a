"""Similarity ranking engine."""

from .ranker import CandidateRanker, DegeneratePolicy, RankingOutcome, rank_candidates

__all__ = ["CandidateRanker", "DegeneratePolicy", "RankingOutcome", "rank_candidates"]
