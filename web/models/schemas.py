"""Request/response models for the analysis API.

Field names on the wire keep the original service's JSON shape
(``DevOpsScore``, ``CosSim``, ...); Python code uses snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from skillrank.entities import RankedResult


class EpScores(BaseModel):
    """Skill profile to match companies against."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    devops_score: float = Field(default=0.0, alias="DevOpsScore")
    fe_score: float = Field(default=0.0, alias="FeScore")
    be_score: float = Field(default=0.0, alias="BeScore")

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data):
        if isinstance(data, dict):
            canonical = {"devopsscore": "DevOpsScore", "fescore": "FeScore", "bescore": "BeScore"}
            return {canonical.get(str(k).lower(), k): v for k, v in data.items()}
        return data

    def to_vector(self) -> list[float]:
        return [self.devops_score, self.fe_score, self.be_score]


class CompanyRank(BaseModel):
    """One ranked company in the /analysis response."""

    model_config = ConfigDict(populate_by_name=True)

    scores: list[float] = Field(alias="Scores")
    name: str = Field(alias="Name")
    cos_sim: float = Field(alias="CosSim")

    @classmethod
    def from_result(cls, result: RankedResult) -> "CompanyRank":
        return cls(scores=result.scores, name=result.name, cos_sim=result.score)
