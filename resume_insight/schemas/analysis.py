from __future__ import annotations

from pydantic import Field

from .base import CamelModel


class ScoreSet(CamelModel):
    ats_score: int = Field(ge=0, le=100)
    resume_score: int = Field(ge=0, le=100)
    skill_match: int = Field(ge=0, le=100)


class AnalysisResult(CamelModel):
    scores: ScoreSet
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    advisory_powered: bool = False
