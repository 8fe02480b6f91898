"""Notification endpoints — per-user inbox."""

from fastapi import APIRouter, Depends, Query, status

from proflow.application.schemas import (
    ClearNotificationsResponse,
    NotificationCreate,
    NotificationResponse,
)
from proflow.application.services import NotificationService
from proflow.domain.entities import Notification
from proflow.infrastructure.dependencies import get_notification_service

router = APIRouter(prefix="/notifications", tags=["Notifications"])


def _to_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=notification.id,
        user_id=notification.user_id,
        message=notification.message,
        link=notification.link,
        is_read=notification.is_read,
        created_at=notification.created_at,
    )


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    user_id: str = Query(..., alias="userId", min_length=1),
    unread_only: bool = Query(True, alias="unreadOnly"),
    limit: int | None = Query(None, ge=1, le=200),
    service: NotificationService = Depends(get_notification_service),
) -> list[NotificationResponse]:
    """A user's notifications, newest first."""
    notifications = await service.list_for_user(user_id, unread_only=unread_only, limit=limit)
    return [_to_response(n) for n in notifications]


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    data: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    return _to_response(await service.create_notification(data))


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    return _to_response(await service.mark_read(notification_id))


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
) -> None:
    await service.delete_notification(notification_id)


@router.delete("", response_model=ClearNotificationsResponse)
async def clear_notifications(
    user_id: str = Query(..., alias="userId", min_length=1),
    service: NotificationService = Depends(get_notification_service),
) -> ClearNotificationsResponse:
    """Delete every notification addressed to a user."""
    deleted = await service.clear_for_user(user_id)
    return ClearNotificationsResponse(user_id=user_id, deleted=deleted)
