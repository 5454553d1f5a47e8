"""
Project model for saved practice sessions.

A project bundles everything a learner produced for one scenario: the
diagram, the conversation with the stakeholder persona and the latest
evaluation. Saves are full replacements keyed by id.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB

from archcoach.database import Base

# JSONB on Postgres, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProjectRecord(Base):
    """
    Persisted project row.

    Attributes:
        id: Client-generated project UUID
        title: Project title shown in the editor
        scenario_id: Scenario the project was created for
        diagram_data: Diagram as {"nodes": [...], "edges": [...]}
        chat_history: Ordered list of {"role", "content"} turns
        evaluation: Latest evaluation verdict, if any
        last_modified: Refreshed on every successful save
    """
    __tablename__ = "projects"

    id = Column(Uuid, primary_key=True)
    title = Column(String(255), nullable=False)
    scenario_id = Column(String(100), nullable=False)
    diagram_data = Column(JSONType, nullable=True)
    chat_history = Column(JSONType, nullable=True)
    evaluation = Column(JSONType, nullable=True)
    last_modified = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<ProjectRecord(id={self.id}, title='{self.title}')>"
