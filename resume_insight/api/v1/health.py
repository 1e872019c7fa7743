from fastapi import APIRouter

from resume_insight.advisory import get_advisory_status
from resume_insight.vocabulary import get_vocabulary

router = APIRouter()


@router.get("/health", summary="Health Check", description="Liveness plus vocabulary and advisory readiness.")
async def health_check():
    vocabulary = get_vocabulary()
    return {
        "status": "healthy",
        "vocabularySkills": len(vocabulary.skills),
        "advisory": get_advisory_status().status,
    }
