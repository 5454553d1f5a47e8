"""
Project store backed by SQLAlchemy.

save() is a full-replace upsert keyed by project id, committed in a single
transaction. Diagram and chat history are stored as JSON and rebuilt into
schema objects on load.
"""

import logging
import uuid
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from archcoach.errors import PersistenceError
from archcoach.models.project import ProjectRecord
from archcoach.schemas.diagram import Diagram
from archcoach.schemas.project import Project

logger = logging.getLogger(__name__)


class ProjectStore:
    """Persists and retrieves Project aggregates."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, project: Project) -> None:
        """
        Create or fully replace a project.

        last_modified is refreshed before writing. When the project carries no
        evaluation, the stored one is kept.

        Raises:
            PersistenceError: If the write fails; nothing is persisted
        """
        project.touch()
        try:
            if project.evaluation is None:
                # A save without a verdict keeps the stored one
                existing = self.db.get(ProjectRecord, project.id)
                if existing is not None:
                    project.evaluation = existing.evaluation
        except SQLAlchemyError as e:
            logger.error(f"Error reading project {project.id} before save: {e}")
            raise PersistenceError(f"Failed to save project {project.id}") from e

        record = ProjectRecord(
            id=project.id,
            title=project.title,
            scenario_id=project.scenario_id,
            diagram_data=project.diagram.to_json(),
            chat_history=[turn.model_dump(mode="json") for turn in project.chat_history],
            evaluation=project.evaluation,
            last_modified=project.last_modified,
        )
        try:
            self.db.merge(record)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error saving project {project.id}: {e}")
            raise PersistenceError(f"Failed to save project {project.id}") from e

    def find_by_id(self, project_id: uuid.UUID) -> Optional[Project]:
        """
        Load a project by id.

        Raises:
            PersistenceError: If the read fails
        """
        try:
            record = self.db.get(ProjectRecord, project_id)
        except SQLAlchemyError as e:
            logger.error(f"Error loading project {project_id}: {e}")
            raise PersistenceError(f"Failed to load project {project_id}") from e

        if record is None:
            return None

        return Project(
            id=record.id,
            title=record.title,
            scenario_id=record.scenario_id,
            diagram=Diagram.model_validate(record.diagram_data or {"nodes": [], "edges": []}),
            chat_history=record.chat_history or [],
            evaluation=record.evaluation,
            last_modified=record.last_modified,
        )
