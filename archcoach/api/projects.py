"""
Project persistence API.
Saves replace the whole project; there are no partial updates.
"""

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from archcoach.api.deps import get_project_store
from archcoach.errors import PersistenceError
from archcoach.schemas.project import ProjectSaveRequest, ProjectSaveResponse, ProjectResponse
from archcoach.services.project_store import ProjectStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=ProjectSaveResponse)
async def save_project(
    request: ProjectSaveRequest,
    store: Optional[ProjectStore] = Depends(get_project_store),
):
    """
    Create or replace a project.

    With persistence disabled the save is acknowledged but nothing is stored.
    """
    logger.info(f"Saving project: {request.title}")

    if store is None:
        return ProjectSaveResponse(
            id=request.id,
            status="success",
            message="Saved to session (mock)",
        )

    project = request.to_project()
    try:
        store.save(project)
    except PersistenceError as e:
        logger.error(f"Error saving project: {e}")
        return ProjectSaveResponse(status="error", message="Failed to save")

    return ProjectSaveResponse(
        id=project.id,
        status="success",
        message="Project saved successfully",
    )


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: uuid.UUID,
    store: Optional[ProjectStore] = Depends(get_project_store),
):
    """Load a saved project by id."""
    if store is None:
        raise HTTPException(status_code=404, detail="Persistence is disabled")

    try:
        project = store.find_by_id(project_id)
    except PersistenceError as e:
        logger.error(f"Error loading project: {e}")
        raise HTTPException(status_code=500, detail="Failed to load project")

    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")

    return ProjectResponse.from_project(project)
