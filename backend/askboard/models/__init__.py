# askboard/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: account, credentials and public profile
- Tag: normalized tag names shared by questions
- Question: a question with its vote sets and derived counters
- Answer: an answer to a question, optionally the accepted one
- Notification: activity message addressed to a user
"""
from .user import User
from .tag import Tag
from .question import Question
from .answer import Answer
from .notification import Notification, NotificationType
