"""Pydantic DTOs for clients and creators."""

from proflow.application.schemas.common import CamelModel


class ClientResponse(CamelModel):
    id: str
    name: str
    email: str
    avatar: str
    data_ai_hint: str


class CreatorResponse(CamelModel):
    id: str
    name: str
    email: str
    description: str
    avatar: str
    mobile: str
