import logging

import sentry_sdk
from fastapi import FastAPI

from resume_insight.api.v1.advisory import router as advisory_router
from resume_insight.api.v1.health import router as health_router
from resume_insight.api.v1.resume import router as resume_router
from resume_insight.core.config import settings

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Resume Insight API", version="0.1.0")

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(resume_router, prefix="/v1", tags=["Resume"])
app.include_router(advisory_router, prefix="/v1", tags=["Advisory"])
