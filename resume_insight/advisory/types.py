from dataclasses import dataclass
from typing import Literal, Protocol

AdvisoryKind = Literal["resume_analysis", "career_path", "section_suggestions", "job_match"]


@dataclass(frozen=True)
class AdvisoryPrompt:
    kind: AdvisoryKind
    system_role: str
    prompt: str


class AdvisoryClient(Protocol):
    @property
    def enabled(self) -> bool: ...

    @property
    def model(self) -> str: ...

    def generate(self, prompt: str, system_role: str) -> str | None: ...
