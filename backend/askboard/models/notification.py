# askboard/models/notification.py
from enum import Enum

from tortoise import fields, models


class NotificationType(str, Enum):
    ANSWER = "answer"
    COMMENT = "comment"
    MENTION = "mention"
    VOTE = "vote"
    ACCEPT = "accept"



class Notification(models.Model):
    """
    A message to one user about activity on their content.
    type is a NotificationType; any other value is rejected when the row is built.
    """
    id = fields.IntField(pk=True)
    recipient = fields.ForeignKeyField(
        "models.User",
        related_name="notifications",
        on_delete=fields.CASCADE,
    )
    sender = fields.ForeignKeyField(
        "models.User",
        related_name="sent_notifications",
        on_delete=fields.CASCADE,
    )
    type = fields.CharEnumField(NotificationType, max_length=16)
    question = fields.ForeignKeyField(
        "models.Question",
        related_name="notifications",
        null=True,
        on_delete=fields.CASCADE,
    )
    answer = fields.ForeignKeyField(
        "models.Answer",
        related_name="notifications",
        null=True,
        on_delete=fields.CASCADE,
    )
    content = fields.CharField(max_length=512)
    is_read = fields.BooleanField(default=False, index=True)
    created_at = fields.DatetimeField(auto_now_add=True, index=True)

    class Meta:
        table = "notifications"
