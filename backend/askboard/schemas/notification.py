# askboard/schemas/notification.py
from typing import Optional

from pydantic import BaseModel


class MarkReadIn(BaseModel):
    """Ids to mark read; omitted or null marks every notification of the caller."""
    notificationIds: Optional[list[int]] = None
