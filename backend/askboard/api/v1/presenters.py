# askboard/api/v1/presenters.py
"""
Model -> JSON dict conversion shared by the routers.
Keys are camelCase to match what the web client reads.
"""
import datetime as dt
from typing import Optional

from askboard.models.answer import Answer
from askboard.models.notification import Notification, NotificationType
from askboard.models.question import Question
from askboard.models.user import User
from askboard.services.ranking import question_is_hot


def iso(value: Optional[dt.datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat() if value.tzinfo else value.isoformat() + "Z"


def user_to_dict(u: User) -> dict:
    return {
        "id": str(u.id),
        "username": u.username,
        "email": u.email,
        "avatar": u.avatar,
        "reputation": u.reputation,
        "role": u.role,
    }


def author_to_dict(u: User) -> dict:
    """Public author card embedded in questions and answers."""
    return {"id": str(u.id), "username": u.username, "avatar": u.avatar, "reputation": u.reputation}


def question_to_dict(q: Question) -> dict:
    """Summary shape used by listing and create; author and tags must be fetched."""
    return {
        "id": str(q.id),
        "title": q.title,
        "description": q.description,
        "tags": sorted(t.name for t in q.tags),
        "author": author_to_dict(q.author),
        "createdAt": iso(q.created_at),
        "updatedAt": iso(q.updated_at),
        "viewCount": q.view_count,
        "answerCount": q.answer_count,
        "voteCount": q.vote_count,
        "hasAcceptedAnswer": q.accepted_answer_id is not None,
        "acceptedAnswerId": str(q.accepted_answer_id) if q.accepted_answer_id else None,
        "isHot": question_is_hot(q),
    }


def answer_to_dict(a: Answer, user_vote: Optional[str] = None) -> dict:
    return {
        "id": str(a.id),
        "questionId": str(a.question_id),
        "content": a.content,
        "author": author_to_dict(a.author),
        "createdAt": iso(a.created_at),
        "updatedAt": iso(a.updated_at),
        "isAccepted": a.is_accepted,
        "voteCount": a.vote_count,
        "userVote": user_vote,
    }


def notification_to_dict(n: Notification) -> dict:
    return {
        "id": n.id,
        "type": NotificationType(n.type).value,
        "content": n.content,
        "isRead": n.is_read,
        "createdAt": iso(n.created_at),
        "sender": {"id": str(n.sender.id), "username": n.sender.username, "avatar": n.sender.avatar},
        "question": {"id": str(n.question.id), "title": n.question.title} if n.question else None,
        "answer": str(n.answer_id) if n.answer_id else None,
    }
