"""Candidate entities scored by the ranking engine."""

from typing import Annotated

from pydantic import BaseModel, Field

# Finite floats only: NaN/inf would silently poison a cosine score.
Score = Annotated[float, Field(allow_inf_nan=False)]


class Candidate(BaseModel):
    """
    An entity to be ranked against a query vector.

    In the company-matching service ``scores`` holds the devops, front-end
    and back-end proficiency in that order, but nothing in the engine
    depends on the vector having three components.
    """
    name: str
    scores: list[Score] = Field(default_factory=list)
    id: int | None = None

    model_config = {
        "frozen": True
    }


class RankedResult(BaseModel):
    """A candidate annotated with its similarity to one query vector.

    Attributes:
        name: Candidate display name
        scores: The candidate's original vector, unchanged
        score: Cosine similarity in [-1, 1]
    """

    name: str
    scores: list[float]
    score: float

    model_config = {
        "frozen": True,
    }

    @classmethod
    def from_candidate(cls, candidate: Candidate, score: float) -> "RankedResult":
        return cls(name=candidate.name, scores=list(candidate.scores), score=score)
