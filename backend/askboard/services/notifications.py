# askboard/services/notifications.py
"""
Notification fan-out.

Notifications are a side effect of answering, accepting and voting. A
failed write is logged and never fails the request that triggered it, and
nobody is notified about their own activity.
"""
import logging
from typing import Optional

from tortoise.exceptions import BaseORMException

from askboard.models.answer import Answer
from askboard.models.notification import Notification, NotificationType
from askboard.models.question import Question
from askboard.models.user import User

logger = logging.getLogger("uvicorn.error")


def _same_user(a, b) -> bool:
    return str(a) == str(b)


async def create_notification(
    recipient_id,
    sender_id,
    type: NotificationType | str,
    content: str,
    question_id=None,
    answer_id=None,
) -> Optional[Notification]:
    if _same_user(recipient_id, sender_id):
        return None
    try:
        return await Notification.create(
            recipient_id=recipient_id,
            sender_id=sender_id,
            type=type,
            question_id=question_id,
            answer_id=answer_id,
            content=content[:512],
        )
    except BaseORMException:
        logger.exception("[notifications] failed to create %s notification for %s", type, recipient_id)
        return None


async def notify_answer_posted(question: Question, answer: Answer, sender: User) -> Optional[Notification]:
    return await create_notification(
        recipient_id=question.author_id,
        sender_id=sender.id,
        type=NotificationType.ANSWER,
        content=f'{sender.username} answered your question "{question.title}"',
        question_id=question.id,
        answer_id=answer.id,
    )


async def notify_answer_accepted(question: Question, answer: Answer, sender: User) -> Optional[Notification]:
    return await create_notification(
        recipient_id=answer.author_id,
        sender_id=sender.id,
        type=NotificationType.ACCEPT,
        content=f'{sender.username} accepted your answer on "{question.title}"',
        question_id=question.id,
        answer_id=answer.id,
    )


async def notify_vote_cast(question: Question, sender: User, vote_type: str,
                           answer: Optional[Answer] = None) -> Optional[Notification]:
    """Notify the author of the voted post; answer is None for a vote on the question itself."""
    target = answer if answer is not None else question
    verb = "upvoted" if vote_type == "upvote" else "downvoted"
    noun = "answer on" if answer is not None else "question"
    return await create_notification(
        recipient_id=target.author_id,
        sender_id=sender.id,
        type=NotificationType.VOTE,
        content=f'{sender.username} {verb} your {noun} "{question.title}"',
        question_id=question.id,
        answer_id=answer.id if answer is not None else None,
    )
