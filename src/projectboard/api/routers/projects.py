"""Projects router for ProjectBoard API."""

from typing import List
from fastapi import APIRouter, Depends, Path, Request

from projectboard.managers.projects import ProjectManager
from projectboard.models import Project, ProjectCreate, ProjectUpdate


router = APIRouter()


def get_project_manager(request: Request) -> ProjectManager:
    """Return the ProjectManager bound to the running app."""
    return request.app.state.project_manager


@router.get("", response_model=List[Project])
async def list_projects(manager: ProjectManager = Depends(get_project_manager)):
    """List all projects."""
    return manager.list_projects()


@router.post("", response_model=Project, status_code=201)
async def create_project(
    request: ProjectCreate,
    manager: ProjectManager = Depends(get_project_manager),
):
    """Create a new project."""
    return manager.create_project(request)


@router.put("/{project_id}", response_model=Project)
async def update_project(
    request: ProjectUpdate,
    project_id: int = Path(..., description="Project ID"),
    manager: ProjectManager = Depends(get_project_manager),
):
    """Replace every field of an existing project."""
    return manager.update_project(project_id, request)


@router.delete("/{project_id}")
async def delete_project(
    project_id: int = Path(..., description="Project ID"),
    manager: ProjectManager = Depends(get_project_manager),
):
    """Delete a project. Succeeds even if the project doesn't exist."""
    manager.delete_project(project_id)
    return {"success": True}
