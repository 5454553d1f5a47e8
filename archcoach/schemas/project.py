"""
Project-related Pydantic schemas.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List

from pydantic import BaseModel, AliasChoices, Field

from archcoach.schemas.chat import ChatTurn
from archcoach.schemas.diagram import Diagram


class Project(BaseModel):
    """
    Project aggregate as seen by the application.

    The store persists it as a whole; there are no partial updates.
    """
    id: uuid.UUID
    title: str
    scenario_id: str
    diagram: Diagram = Field(default_factory=Diagram)
    chat_history: List[ChatTurn] = []
    evaluation: Optional[Dict[str, Any]] = None
    last_modified: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        self.last_modified = datetime.now(timezone.utc)

    def change_title(self, new_title: str) -> None:
        """Rename the project. Empty titles are ignored."""
        if new_title:
            self.title = new_title
            self.touch()


class ProjectSaveRequest(BaseModel):
    """Schema for saving (creating or replacing) a project."""
    id: uuid.UUID
    title: str
    scenario_id: str
    diagram_data: Diagram = Field(
        default_factory=Diagram,
        validation_alias=AliasChoices("diagram_data", "diagram"),
    )
    chat_history: List[ChatTurn] = Field(
        default=[],
        validation_alias=AliasChoices("chat_history", "chatHistory"),
    )
    evaluation: Optional[Dict[str, Any]] = None

    def to_project(self) -> Project:
        return Project(
            id=self.id,
            title=self.title,
            scenario_id=self.scenario_id,
            diagram=self.diagram_data,
            chat_history=self.chat_history,
            evaluation=self.evaluation,
        )


class ProjectSaveResponse(BaseModel):
    """Schema for the save acknowledgement."""
    id: Optional[uuid.UUID] = None
    status: str
    message: str


class ProjectResponse(BaseModel):
    """Schema for a loaded project."""
    id: uuid.UUID
    title: str
    scenario_id: str
    diagram_data: Dict[str, Any]
    chat_history: List[ChatTurn]
    evaluation: Optional[Dict[str, Any]]
    last_modified: datetime

    @classmethod
    def from_project(cls, project: Project) -> "ProjectResponse":
        return cls(
            id=project.id,
            title=project.title,
            scenario_id=project.scenario_id,
            diagram_data=project.diagram.to_json(),
            chat_history=project.chat_history,
            evaluation=project.evaluation,
            last_modified=project.last_modified,
        )
