"""
API routes for the coaching backend.
"""

from fastapi import APIRouter

from archcoach.api.chat import router as chat_router
from archcoach.api.evaluate import router as evaluate_router
from archcoach.api.projects import router as projects_router
from archcoach.api.scenarios import router as scenarios_router

# Create main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(chat_router, prefix="/chat", tags=["Stakeholder Chat"])
api_router.include_router(evaluate_router, prefix="/evaluate", tags=["Evaluation"])
api_router.include_router(projects_router, prefix="/projects", tags=["Projects"])
api_router.include_router(scenarios_router, prefix="/scenarios", tags=["Scenarios"])
