from fastapi import APIRouter, Depends

from resume_insight.advisory import AdvisoryService, get_advisory_service
from resume_insight.parsing import extract_profile
from resume_insight.schemas import AnalysisResult, MatchResult, StructuredProfile
from resume_insight.schemas.requests import AnalyzeResumeRequest, JobMatchRequest, ResumeTextRequest
from resume_insight.services import analyze_resume, match_resume_to_job

router = APIRouter()


@router.post("/resume/extract", response_model=StructuredProfile)
def resume_extract(payload: ResumeTextRequest):
    return extract_profile(payload.resume_text)


@router.post("/resume/analyze", response_model=AnalysisResult)
def resume_analyze(payload: AnalyzeResumeRequest, advisory: AdvisoryService = Depends(get_advisory_service)):
    return analyze_resume(
        payload.resume_text,
        payload.target_role,
        payload.experience_level,
        advisory=advisory,
    )


@router.post("/job-match", response_model=MatchResult)
def job_match(payload: JobMatchRequest, advisory: AdvisoryService = Depends(get_advisory_service)):
    return match_resume_to_job(payload.resume_text, payload.job_description_text, advisory=advisory)
