"""Read-only client and creator endpoints."""

from fastapi import APIRouter, Depends

from proflow.application.schemas import ClientResponse, CreatorResponse
from proflow.application.services import DirectoryService
from proflow.domain.entities import Client, Creator
from proflow.infrastructure.dependencies import get_directory_service

router = APIRouter(tags=["Directory"])


def _client_to_response(client: Client) -> ClientResponse:
    return ClientResponse(
        id=client.id,
        name=client.name,
        email=client.email,
        avatar=client.avatar,
        data_ai_hint=client.data_ai_hint,
    )


def _creator_to_response(creator: Creator) -> CreatorResponse:
    return CreatorResponse(
        id=creator.id,
        name=creator.name,
        email=creator.email,
        description=creator.description,
        avatar=creator.avatar,
        mobile=creator.mobile,
    )


@router.get("/clients", response_model=list[ClientResponse])
async def list_clients(service: DirectoryService = Depends(get_directory_service)) -> list[ClientResponse]:
    return [_client_to_response(c) for c in await service.list_clients()]


@router.get("/clients/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    service: DirectoryService = Depends(get_directory_service),
) -> ClientResponse:
    return _client_to_response(await service.get_client(client_id))


@router.get("/creators", response_model=list[CreatorResponse])
async def list_creators(service: DirectoryService = Depends(get_directory_service)) -> list[CreatorResponse]:
    return [_creator_to_response(c) for c in await service.list_creators()]


@router.get("/creators/{creator_id}", response_model=CreatorResponse)
async def get_creator(
    creator_id: str,
    service: DirectoryService = Depends(get_directory_service),
) -> CreatorResponse:
    return _creator_to_response(await service.get_creator(creator_id))
