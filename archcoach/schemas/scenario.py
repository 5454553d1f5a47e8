"""
Scenario-related Pydantic schemas.
"""

from typing import Dict, List

from pydantic import BaseModel

from archcoach.schemas.chat import ChatTurn


class ScenarioResponse(BaseModel):
    """A scenario as shown on the selection screen. Hidden context is never included."""
    id: str
    title: str
    description: str
    requirements: Dict[str, str]
    is_custom: bool = False


class ScenarioListResponse(BaseModel):
    scenarios: List[ScenarioResponse]


class CustomOpeningRequest(BaseModel):
    """Learner-defined theme for a custom scenario."""
    title: str
    description: str = ""
    difficulty: str = "medium"


class CustomOpeningResponse(BaseModel):
    """Opening transcript the client resubmits with every chat call."""
    messages: List[ChatTurn]
