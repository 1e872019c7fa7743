from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import CamelModel


class MatchScores(CamelModel):
    overall: int = Field(default=0, ge=0, le=100)
    skills: int = Field(default=0, ge=0, le=100)
    experience: int = Field(default=0, ge=0, le=100)
    keywords: int = Field(default=0, ge=0, le=100)


class KeywordHit(CamelModel):
    keyword: str
    count: int = Field(ge=0)


class MatchResult(CamelModel):
    match_scores: MatchScores = Field(default_factory=MatchScores)
    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    matched_keywords: list[KeywordHit] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list, max_length=5)
    advisory_insights: dict[str, Any] | None = None
    advisory_powered: bool = False
