"""Rank candidates by cosine similarity to a query vector."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from loguru import logger

from ..entities.candidate import Candidate, RankedResult
from ..errors import ConfigurationError, DegenerateVectorError
from ..utils.performance import timed
from ..utils.similarity import cosine_similarity


class DegeneratePolicy(StrEnum):
    """What to do when a candidate cannot be scored (all-zero vector)."""
    ABORT = "abort"  # Fail the whole ranking, no partial result
    SKIP = "skip"    # Drop the candidate and report it in ``skipped``

    @classmethod
    def parse(cls, value: "str | DegeneratePolicy") -> "DegeneratePolicy":
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            available = ", ".join(p.value for p in cls)
            raise ConfigurationError(
                f"Unknown degenerate vector policy: {value!r}. Available: {available}",
                original_error=e,
            ) from e


@dataclass
class RankingOutcome:
    """Result of one ranking request.

    Attributes:
        results: Ranked candidates, highest similarity first
        skipped: Names of candidates dropped under ``DegeneratePolicy.SKIP``
    """
    results: list[RankedResult] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class CandidateRanker:
    """Scores every candidate against a query and sorts them.

    The ranker is stateless between calls: it holds only its policy, so a
    single instance can serve concurrent requests.

    Ties keep the order in which candidates were supplied (``list.sort`` is
    stable), which makes the output fully deterministic.
    """

    def __init__(self, policy: DegeneratePolicy | str = DegeneratePolicy.ABORT):
        self.policy = DegeneratePolicy.parse(policy)

    @timed("CandidateRanker.rank")
    def rank(self, query: Sequence[float], candidates: Sequence[Candidate]) -> RankingOutcome:
        """Rank candidates by similarity to ``query``.

        Args:
            query: The target profile vector
            candidates: Candidates in their original order

        Returns:
            RankingOutcome with results sorted by descending score

        Raises:
            DegenerateVectorError: Under the abort policy, when the query or
                any candidate vector is all-zero
        """
        outcome = RankingOutcome()

        for candidate in candidates:
            try:
                score = cosine_similarity(candidate.scores, query)
            except DegenerateVectorError as e:
                if self.policy is DegeneratePolicy.ABORT:
                    e.details["candidate"] = candidate.name
                    raise
                outcome.skipped.append(candidate.name)
                continue
            outcome.results.append(RankedResult.from_candidate(candidate, score))

        outcome.results.sort(key=lambda r: r.score, reverse=True)

        logger.debug(
            f"Ranked {len(outcome.results)} candidates "
            f"(skipped {len(outcome.skipped)}, policy={self.policy.value})"
        )
        return outcome


def rank_candidates(
    query: Sequence[float],
    candidates: Sequence[Candidate],
    policy: DegeneratePolicy | str = DegeneratePolicy.ABORT,
) -> list[RankedResult]:
    """Shortcut for ``CandidateRanker(policy).rank(query, candidates).results``."""
    return CandidateRanker(policy).rank(query, candidates).results
