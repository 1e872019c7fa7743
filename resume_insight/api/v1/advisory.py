from fastapi import APIRouter, Depends, HTTPException, status

from resume_insight.advisory import AdvisoryService, AdvisoryUnavailableError, get_advisory_service, get_advisory_status
from resume_insight.parsing import extract_profile
from resume_insight.schemas import AdvisoryStatus, CareerPath, SectionSuggestions
from resume_insight.schemas.requests import CareerPathRequest, SuggestionsRequest
from resume_insight.services import generate_career_path, generate_improvement_suggestions

router = APIRouter()


def _ensure_advisory(advisory: AdvisoryService, required: bool) -> None:
    if not required:
        return
    try:
        advisory.require_enabled()
    except AdvisoryUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


@router.get("/advisory/status", response_model=AdvisoryStatus)
async def advisory_status():
    return get_advisory_status()


@router.post("/advisory/career-path", response_model=CareerPath)
def advisory_career_path(payload: CareerPathRequest, advisory: AdvisoryService = Depends(get_advisory_service)):
    _ensure_advisory(advisory, payload.require_advisory)
    profile = extract_profile(payload.resume_text)
    return generate_career_path(profile, payload.target_role, payload.experience_level, advisory=advisory)


@router.post("/advisory/suggestions", response_model=SectionSuggestions)
def advisory_suggestions(payload: SuggestionsRequest, advisory: AdvisoryService = Depends(get_advisory_service)):
    _ensure_advisory(advisory, payload.require_advisory)
    return generate_improvement_suggestions(payload.content, payload.section, advisory=advisory)
