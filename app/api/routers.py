from fastapi import APIRouter

from app.api.v1.cv import router as cv_router
from app.api.v1.jobs import router as jobs_router
from app.api.v1.profile import router as profile_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(profile_router)
api_router.include_router(cv_router)
api_router.include_router(jobs_router)
