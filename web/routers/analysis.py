"""Company analysis API"""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response

from skillrank.datasource import BaseCandidateSource
from skillrank.errors import CandidateSourceError, DegenerateVectorError
from skillrank.ranking import CandidateRanker

from web.core.context import get_candidate_source, get_ranker
from web.models.schemas import CompanyRank, EpScores

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analysis", tags=["analysis"])

SKIPPED_HEADER = "X-Skipped-Candidates"


def encode_skipped(names: list[str]) -> str:
    """Comma-joined, percent-encoded names; header values must stay ASCII."""
    return ",".join(quote(name, safe="") for name in names)


@router.post("", response_model=list[CompanyRank])
def analysis(
    req: EpScores,
    response: Response,
    source: BaseCandidateSource = Depends(get_candidate_source),
    ranker: CandidateRanker = Depends(get_ranker),
):
    """Rank companies by cosine similarity to the posted EP scores"""
    try:
        candidates = source.list_candidates()
    except CandidateSourceError as e:
        logger.error(f"Candidate source unavailable: {e}")
        raise HTTPException(status_code=503, detail=e.to_dict())

    try:
        outcome = ranker.rank(req.to_vector(), candidates)
    except DegenerateVectorError as e:
        logger.warning(f"Rejected analysis request: {e}")
        raise HTTPException(status_code=422, detail=e.to_dict())

    if outcome.skipped:
        logger.info(f"Skipped {len(outcome.skipped)} degenerate candidates: {outcome.skipped}")
        response.headers[SKIPPED_HEADER] = encode_skipped(outcome.skipped)

    return [CompanyRank.from_result(r) for r in outcome.results]
