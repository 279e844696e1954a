"""Request-scoped dependencies for the routers."""

from fastapi import Depends

from skillrank.config import settings as engine_settings
from skillrank.datasource import BaseCandidateSource, CandidateSourceFactory
from skillrank.ranking import CandidateRanker

from web.config import WebSettings, get_settings


def get_candidate_source(settings: WebSettings = Depends(get_settings)) -> BaseCandidateSource:
    """Dependency injection: candidate source for the current request."""
    if settings.CANDIDATE_SOURCE_TYPE == "json_file":
        return CandidateSourceFactory.create("json_file", path=settings.CANDIDATE_FILE)
    return CandidateSourceFactory.create(settings.CANDIDATE_SOURCE_TYPE)


def get_ranker() -> CandidateRanker:
    """Dependency injection: ranker configured with the engine's degenerate policy."""
    return CandidateRanker(engine_settings.DEGENERATE_POLICY)
