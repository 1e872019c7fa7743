from __future__ import annotations

from pydantic import BaseModel, Field


class ResumeTextRequest(BaseModel):
    resume_text: str = Field(min_length=1, max_length=50000)


class AnalyzeResumeRequest(ResumeTextRequest):
    target_role: str = Field(default="", max_length=100)
    experience_level: str = Field(default="", max_length=50)


class JobMatchRequest(ResumeTextRequest):
    job_description_text: str = Field(min_length=1, max_length=50000)


class CareerPathRequest(AnalyzeResumeRequest):
    require_advisory: bool = False


class SuggestionsRequest(BaseModel):
    content: str = Field(min_length=1, max_length=50000)
    section: str = Field(default="overall", max_length=30)
    require_advisory: bool = False
