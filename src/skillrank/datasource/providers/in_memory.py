from collections.abc import Iterable

from ..base import BaseCandidateSource
from ...entities.candidate import Candidate


class InMemoryCandidateSource(BaseCandidateSource):
    """
    Candidate source backed by a list held in memory.
    Not persistent.
    """

    def __init__(self, candidates: Iterable[Candidate] = ()):
        self._candidates = list(candidates)

    def list_candidates(self) -> list[Candidate]:
        return list(self._candidates)
