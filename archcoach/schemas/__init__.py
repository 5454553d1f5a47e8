"""
Pydantic schemas for request/response validation.
"""

from archcoach.schemas.chat import ChatRole, ChatTurn, ChatRequest, ChatResponse
from archcoach.schemas.diagram import Diagram, DiagramNode, DiagramEdge, Position
from archcoach.schemas.project import (
    Project,
    ProjectSaveRequest,
    ProjectSaveResponse,
    ProjectResponse,
)
from archcoach.schemas.scenario import (
    ScenarioResponse,
    ScenarioListResponse,
    CustomOpeningRequest,
    CustomOpeningResponse,
)

__all__ = [
    "ChatRole",
    "ChatTurn",
    "ChatRequest",
    "ChatResponse",
    "Diagram",
    "DiagramNode",
    "DiagramEdge",
    "Position",
    "Project",
    "ProjectSaveRequest",
    "ProjectSaveResponse",
    "ProjectResponse",
    "ScenarioResponse",
    "ScenarioListResponse",
    "CustomOpeningRequest",
    "CustomOpeningResponse",
]
