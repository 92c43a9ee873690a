"""Client CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from interior_planner.application.schemas import (
    ClientCreate,
    ClientResponse,
    ClientUpdate,
    ProjectResponse,
)
from interior_planner.application.services import ClientService, ProjectService
from interior_planner.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from interior_planner.infrastructure.dependencies import (
    get_client_service,
    get_project_service,
)

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    service: ClientService = Depends(get_client_service),
) -> list[ClientResponse]:
    """Retrieve every client with their project count."""
    clients = await service.list_clients()
    return [ClientResponse.model_validate(c, from_attributes=True) for c in clients]


@router.get("/last-name/{last_name}", response_model=ClientResponse)
async def get_client_by_last_name(
    last_name: str,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Retrieve a client by last name (case-insensitive)."""
    try:
        client = await service.get_client_by_last_name(last_name)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ClientResponse.model_validate(client, from_attributes=True)


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Retrieve a single client by ID."""
    try:
        client = await service.get_client(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ClientResponse.model_validate(client, from_attributes=True)


@router.get("/{client_id}/projects", response_model=list[ProjectResponse])
async def list_client_projects(
    client_id: int,
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """Retrieve the projects owned by a client."""
    try:
        projects = await service.list_client_projects(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [ProjectResponse.model_validate(p, from_attributes=True) for p in projects]


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Register a new client."""
    try:
        client = await service.create_client(data)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ClientResponse.model_validate(client, from_attributes=True)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Update the supplied fields of an existing client."""
    try:
        client = await service.update_client(client_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ClientResponse.model_validate(client, from_attributes=True)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> None:
    """Delete a client together with their projects and rooms."""
    try:
        await service.delete_client(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
