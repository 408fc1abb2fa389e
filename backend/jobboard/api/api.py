"""
API Router Aggregator.

Combines all v1 API routers into a single router for the main app.
"""

from fastapi import APIRouter

from jobboard.api.v1 import admin, applications, auth, jobs, resume

api_router = APIRouter()

# Routers define their own full paths
api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(resume.router, tags=["Resume"])
api_router.include_router(jobs.router, tags=["Jobs"])
api_router.include_router(applications.router, tags=["Applications"])
api_router.include_router(admin.router, tags=["Admin"])
