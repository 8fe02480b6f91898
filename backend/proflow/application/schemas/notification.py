"""Pydantic DTOs for notifications."""

from datetime import datetime

from pydantic import Field

from proflow.application.schemas.common import CamelModel


class NotificationCreate(CamelModel):
    user_id: str = Field(..., min_length=1, examples=["admin"])
    message: str = Field(..., min_length=1)
    link: str = ""


class NotificationResponse(CamelModel):
    id: str
    user_id: str
    message: str
    link: str
    is_read: bool
    created_at: datetime


class ClearNotificationsResponse(CamelModel):
    user_id: str
    deleted: int
