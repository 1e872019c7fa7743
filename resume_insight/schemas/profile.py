from __future__ import annotations

from pydantic import Field, field_validator

from .base import CamelModel, distinct_casefold

NAME_NOT_FOUND = "Not found"


class ExperienceEntry(CamelModel):
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


class EducationEntry(CamelModel):
    degree: str = ""
    institution: str = ""
    year: str = ""


class StructuredProfile(CamelModel):
    name: str = NAME_NOT_FOUND
    email: str = ""
    phone: str = ""
    skills: list[str] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list, max_length=5)
    education: list[EducationEntry] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)

    @field_validator("skills")
    @classmethod
    def _distinct_skills(cls, value: list[str]) -> list[str]:
        return distinct_casefold(value)

    @field_validator("certifications")
    @classmethod
    def _distinct_certifications(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))
