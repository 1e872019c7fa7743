from __future__ import annotations

from resume_insight.schemas import MatchResult, StructuredProfile

from .types import AdvisoryPrompt

RESUME_CONTEXT_CHARS = 3000
MATCH_CONTEXT_CHARS = 2000
SECTION_CONTEXT_CHARS = 2000

_SECTION_TASKS = {
    "summary": "Rewrite the professional summary to be more impactful and ATS-friendly.",
    "experience": "Suggest improvements for experience descriptions using action verbs and metrics.",
    "skills": "Recommend additional skills to add based on the resume content.",
    "overall": "Provide overall resume improvement suggestions.",
}


def _join_or(values: list[str], fallback: str) -> str:
    return ", ".join(values) if values else fallback


def resume_analysis_prompt(
    resume_text: str,
    profile: StructuredProfile,
    target_role: str,
    experience_level: str = "mid",
) -> AdvisoryPrompt:
    prompt = f"""Analyze the following resume for a {target_role} position at {experience_level} level.

Resume Content:
{resume_text[:RESUME_CONTEXT_CHARS]}

Extracted Skills: {_join_or(profile.skills, "None")}
Experience: {len(profile.experience)} roles listed
Education: {len(profile.education)} degrees listed

Return the analysis as a single JSON object:
{{
  "strengths": ["3-5 key strengths of this resume"],
  "weaknesses": ["3-5 areas that need improvement"],
  "missingSkills": ["5-8 important skills missing for the {target_role} role"],
  "recommendations": ["5-7 specific, actionable recommendations"],
  "atsScore": {{"score": 0, "reasoning": "Brief explanation of the ATS score"}},
  "resumeScore": {{"score": 0, "reasoning": "Brief explanation of the overall resume score"}}
}}

Scores are integers between 0 and 100. Keep feedback practical and specific."""
    return AdvisoryPrompt(
        kind="resume_analysis",
        system_role=(
            "You are an expert resume analyst with 15+ years of experience in recruiting and career "
            "coaching. Provide detailed, constructive, and actionable feedback."
        ),
        prompt=prompt,
    )


def career_path_prompt(profile: StructuredProfile, target_role: str, experience_level: str) -> AdvisoryPrompt:
    prompt = f"""Create a personalized career development plan.

Current Profile:
- Target Role: {target_role}
- Experience Level: {experience_level}
- Current Skills: {_join_or(profile.skills, "Not specified")}
- Experience: {len(profile.experience)} roles

Return the roadmap as a single JSON object:
{{
  "timeline": "Estimated time to reach the target role, e.g. '12-18 months'",
  "phases": [
    {{"phase": "Phase name", "duration": "e.g. '0-3 months'", "skills": ["skill"], "description": "Focus of this phase"}}
  ],
  "prioritySkills": [
    {{"skill": "Skill name", "priority": "high|medium|low", "estimatedTime": "e.g. '2-3 weeks'", "reason": "Why it matters"}}
  ],
  "projectIdeas": [
    {{"title": "Project name", "description": "Brief description", "skills": ["skill"], "duration": "Estimated duration"}}
  ]
}}"""
    return AdvisoryPrompt(
        kind="career_path",
        system_role=(
            "You are an experienced career mentor who helps professionals advance their careers "
            "through structured learning paths."
        ),
        prompt=prompt,
    )


def section_suggestions_prompt(content: str, section: str) -> AdvisoryPrompt:
    task = _SECTION_TASKS.get(section, _SECTION_TASKS["overall"])
    prompt = f"""Analyze this resume section and provide specific improvements:

{content[:SECTION_CONTEXT_CHARS]}

Task: {task}

Return a single JSON object:
{{
  "suggestions": [
    {{"type": "e.g. 'Add metrics'", "original": "Original text if applicable", "improved": "Improved version", "reasoning": "Why this is better"}}
  ],
  "examples": ["Concrete examples of good practices"]
}}"""
    return AdvisoryPrompt(
        kind="section_suggestions",
        system_role=(
            "You are an expert resume writer who helps professionals create compelling, "
            "ATS-optimized resumes."
        ),
        prompt=prompt,
    )


def job_match_prompt(resume_text: str, job_description_text: str, baseline: MatchResult) -> AdvisoryPrompt:
    prompt = f"""Compare this candidate with the job description.

Resume Summary:
{resume_text[:MATCH_CONTEXT_CHARS]}

Job Description:
{job_description_text[:MATCH_CONTEXT_CHARS]}

Basic Match Score: {baseline.match_scores.overall}%
Matched Skills: {", ".join(baseline.matched_skills)}
Missing Skills: {", ".join(baseline.missing_skills)}

Return the enhanced analysis as a single JSON object:
{{
  "fitAssessment": "Overall fit assessment in 2-3 sentences",
  "keyStrengths": ["3-5 reasons this candidate fits"],
  "gaps": ["3-5 areas needing development"],
  "recommendations": ["5-7 actionable tips to improve the match"],
  "interviewTips": ["3-5 things to emphasize in interviews"],
  "salaryRange": {{"estimated": "Estimated range", "confidence": "high|medium|low"}}
}}"""
    return AdvisoryPrompt(
        kind="job_match",
        system_role="You are a senior technical recruiter with expertise in evaluating candidate-job fit.",
        prompt=prompt,
    )
