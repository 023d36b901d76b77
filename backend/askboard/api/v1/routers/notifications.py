# askboard/api/v1/routers/notifications.py
from fastapi import APIRouter, Depends, Query

from askboard.api.v1.deps import get_current_user
from askboard.api.v1.presenters import notification_to_dict
from askboard.models.notification import Notification
from askboard.models.user import User
from askboard.schemas.notification import MarkReadIn

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("")
async def list_notifications(
    user: User = Depends(get_current_user),
    limit: int = Query(20, ge=1, le=100),
    unread: bool = Query(False, description="Only unread notifications"),
):
    """
    Get the caller's notifications, newest first.

    Returns:
        dict: success envelope with:
            - notifications: list with sender and question summaries
            - unreadCount: unread notifications in total (ignores limit)
    """
    qs = Notification.filter(recipient_id=user.id)
    if unread:
        qs = qs.filter(is_read=False)
    rows = await qs.order_by("-created_at", "-id").limit(limit).prefetch_related("sender", "question")
    unread_count = await Notification.filter(recipient_id=user.id, is_read=False).count()
    return {
        "success": True,
        "data": {
            "notifications": [notification_to_dict(n) for n in rows],
            "unreadCount": unread_count,
        },
    }


@router.post("")
async def mark_read(body: MarkReadIn, user: User = Depends(get_current_user)):
    """
    Mark notifications as read.

    With notificationIds only those (and only the caller's) are marked;
    without, every notification of the caller is.
    """
    qs = Notification.filter(recipient_id=user.id, is_read=False)
    if body.notificationIds is not None:
        qs = qs.filter(id__in=body.notificationIds)
    updated = await qs.update(is_read=True)
    return {"success": True, "data": {"updated": updated}}
