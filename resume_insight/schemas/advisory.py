from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from .base import CamelModel

AdvisoryState = Literal["active", "disabled"]
Priority = Literal["high", "medium", "low"]
ResumeSection = Literal["summary", "experience", "skills", "overall"]


class AdvisoryStatus(CamelModel):
    enabled: bool
    configured: bool
    model: str
    status: AdvisoryState


class CareerPhase(CamelModel):
    phase: str
    duration: str = ""
    skills: list[str] = Field(default_factory=list)
    description: str = ""


class PrioritySkill(CamelModel):
    skill: str
    priority: Priority = "medium"
    estimated_time: str = ""
    reason: str = ""

    @field_validator("priority", mode="before")
    @classmethod
    def _lower_priority(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value


class ProjectIdea(CamelModel):
    title: str
    description: str = ""
    skills: list[str] = Field(default_factory=list)
    duration: str = ""


class CareerPath(CamelModel):
    timeline: str = ""
    phases: list[CareerPhase] = Field(default_factory=list)
    priority_skills: list[PrioritySkill] = Field(default_factory=list)
    project_ideas: list[ProjectIdea] = Field(default_factory=list)
    advisory_powered: bool = False


class Suggestion(CamelModel):
    type: str
    original: str = ""
    improved: str = ""
    reasoning: str = ""


class SectionSuggestions(CamelModel):
    section: ResumeSection = "overall"
    suggestions: list[Suggestion] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)
    advisory_powered: bool = False
