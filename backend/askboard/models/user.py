# askboard/models/user.py
"""
Database model for users.
Holds login credentials, public profile fields and the role used for
moderation (admins may delete any question).
"""
import uuid
from tortoise import fields, models


class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many Questions and Answers (via related_name="questions"/"answers")
    - Belongs to the upvoter/downvoter sets of questions and answers
    - Receives and sends Notifications
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    username = fields.CharField(max_length=64, unique=True, index=True)
    email = fields.CharField(max_length=256, unique=True, index=True)
    password_hash = fields.CharField(max_length=255)  # argon2 hash, never plain text
    avatar = fields.CharField(max_length=1024, null=True)  # Avatar image URL
    reputation = fields.IntField(default=0)
    role = fields.CharField(max_length=16, default="user")  # "user" or "admin"
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "users"
