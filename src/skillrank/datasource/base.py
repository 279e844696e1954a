from abc import ABC, abstractmethod

from ..entities.candidate import Candidate


class BaseCandidateSource(ABC):
    """
    Abstract Base Class for candidate sources.

    A source is asked for the current candidate list once per ranking
    request, so implementations must not assume their result is cached
    by the caller.
    """

    @abstractmethod
    def list_candidates(self) -> list[Candidate]:
        """Return the current candidates in their canonical order."""
        pass
