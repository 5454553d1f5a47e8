"""
Scenario API: the selection list and the custom-scenario opening transcript.
"""

from fastapi import APIRouter

from archcoach.schemas.scenario import (
    CustomOpeningRequest,
    CustomOpeningResponse,
    ScenarioListResponse,
    ScenarioResponse,
)
from archcoach.services.scenario_catalog import build_custom_opening, list_scenarios

router = APIRouter()


@router.get("", response_model=ScenarioListResponse)
async def get_scenarios():
    """List the selectable scenarios. Hidden context is never exposed."""
    return ScenarioListResponse(
        scenarios=[ScenarioResponse(**entry) for entry in list_scenarios()]
    )


@router.post("/custom/opening", response_model=CustomOpeningResponse)
async def start_custom_scenario(request: CustomOpeningRequest):
    """
    Build the opening transcript for a learner-defined scenario.

    The first message is the persona briefing (role "system"); the client
    keeps it at the head of the transcript it sends to /api/chat.
    """
    messages = build_custom_opening(request.title, request.description, request.difficulty)
    return CustomOpeningResponse(messages=messages)
