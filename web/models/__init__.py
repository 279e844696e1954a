"""API models for the web application."""

from .schemas import CompanyRank, EpScores

__all__ = ["CompanyRank", "EpScores"]
