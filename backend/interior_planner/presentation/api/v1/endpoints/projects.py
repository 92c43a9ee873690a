"""Project endpoints: CRUD, status filter, deadlines and client reassignment."""

from fastapi import APIRouter, Depends, HTTPException, status

from interior_planner.application.schemas import (
    ProjectCreate,
    ProjectDeadlineResponse,
    ProjectResponse,
    ProjectUpdate,
)
from interior_planner.application.services import ProjectService
from interior_planner.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from interior_planner.infrastructure.dependencies import get_project_service

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """Retrieve every project with its room reference."""
    projects = await service.list_projects()
    return [ProjectResponse.model_validate(p, from_attributes=True) for p in projects]


@router.get("/deadlines", response_model=list[ProjectDeadlineResponse])
async def list_deadlines(
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectDeadlineResponse]:
    """Retrieve all projects in ascending order of due date."""
    deadlines = await service.list_deadlines()
    return [
        ProjectDeadlineResponse.model_validate(d, from_attributes=True)
        for d in deadlines
    ]


@router.get("/status/{project_status}", response_model=list[ProjectResponse])
async def list_projects_by_status(
    project_status: str,
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """Retrieve all projects with the given status (case-insensitive)."""
    try:
        projects = await service.list_projects_by_status(project_status)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [ProjectResponse.model_validate(p, from_attributes=True) for p in projects]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Retrieve a single project by ID."""
    try:
        project = await service.get_project(project_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.post(
    "/clients/{client_id}",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_project(
    client_id: int,
    data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Create a project for an existing client."""
    try:
        project = await service.create_project(data, client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    data: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Replace the editable fields of a project."""
    try:
        project = await service.update_project(project_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.patch("/{project_id}/clients/{client_id}", response_model=ProjectResponse)
async def reassign_client(
    project_id: int,
    client_id: int,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Move a project to a different client."""
    try:
        project = await service.reassign_client(project_id, client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    service: ProjectService = Depends(get_project_service),
) -> None:
    """Delete a project and its room."""
    try:
        await service.delete_project(project_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
