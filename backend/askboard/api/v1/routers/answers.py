# askboard/api/v1/routers/answers.py
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from tortoise.expressions import F

from askboard.api.v1.deps import get_current_user
from askboard.api.v1.presenters import answer_to_dict
from askboard.models.answer import Answer
from askboard.models.question import Question
from askboard.models.user import User
from askboard.schemas.question import AnswerCreateIn, VoteIn
from askboard.services.notifications import notify_answer_accepted, notify_answer_posted, notify_vote_cast
from askboard.services.voting import toggle_vote

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["answers"])


async def _get_answer_or_404(aid: UUID) -> Answer:
    a = await Answer.get_or_none(id=aid)
    if not a:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="ANSWER_NOT_FOUND")
    return a


@router.get("/questions/{qid}/answers")
async def list_answers(qid: UUID):
    """
    Get all answers of a question, accepted first, then newest.

    Raises:
        HTTPException (404): QUESTION_NOT_FOUND
    """
    if not await Question.filter(id=qid).exists():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QUESTION_NOT_FOUND")
    answers = await Answer.filter(question_id=qid).order_by("-is_accepted", "-created_at").prefetch_related("author")
    items = [answer_to_dict(a) for a in answers]
    return {"success": True, "data": {"answers": items, "count": len(items)}}


@router.post("/questions/{qid}/answers", status_code=status.HTTP_201_CREATED)
async def create_answer(qid: UUID, body: AnswerCreateIn, user: User = Depends(get_current_user)):
    """
    Answer a question and notify its author.

    Raises:
        HTTPException (404): QUESTION_NOT_FOUND
    """
    q = await Question.get_or_none(id=qid)
    if not q:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QUESTION_NOT_FOUND")
    a = await Answer.create(question=q, author=user, content=body.content)
    await Question.filter(id=q.id).update(answer_count=F("answer_count") + 1)
    await notify_answer_posted(q, a, user)
    await a.fetch_related("author")
    return {"success": True, "data": answer_to_dict(a)}


@router.post("/answers/{aid}/vote")
async def vote_answer(aid: UUID, body: VoteIn, user: User = Depends(get_current_user)):
    """
    Toggle the caller's vote on an answer.

    Raises:
        HTTPException (404): ANSWER_NOT_FOUND
        HTTPException (400): CANNOT_VOTE_OWN_POST
    """
    a = await _get_answer_or_404(aid)
    if str(a.author_id) == str(user.id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="CANNOT_VOTE_OWN_POST")
    outcome = await toggle_vote(a, user, body.voteType)
    if outcome.cast:
        q = await Question.get(id=a.question_id)
        await notify_vote_cast(q, user, body.voteType, answer=a)
    return {"success": True, "data": {"voteCount": outcome.vote_count, "userVote": outcome.user_vote}}


@router.post("/answers/{aid}/accept")
async def accept_answer(aid: UUID, user: User = Depends(get_current_user)):
    """
    Mark an answer as the accepted one for its question (question author only).

    Any previously accepted answer of the same question is un-accepted first.

    Raises:
        HTTPException (404): ANSWER_NOT_FOUND / QUESTION_NOT_FOUND
        HTTPException (403): FORBIDDEN_NOT_OWNER
        HTTPException (400): ANSWER_ALREADY_ACCEPTED
    """
    a = await _get_answer_or_404(aid)
    q = await Question.get_or_none(id=a.question_id)
    if not q:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QUESTION_NOT_FOUND")
    if str(q.author_id) != str(user.id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="FORBIDDEN_NOT_OWNER")
    if a.is_accepted:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ANSWER_ALREADY_ACCEPTED")

    await Answer.filter(question_id=q.id, is_accepted=True).update(is_accepted=False)
    await Answer.filter(id=a.id).update(is_accepted=True)
    await Question.filter(id=q.id).update(accepted_answer_id=a.id)
    await notify_answer_accepted(q, a, user)
    logger.info("[answers] %s accepted %s on %s", user.username, a.id, q.id)
    return {"success": True, "data": {"questionId": str(q.id), "acceptedAnswerId": str(a.id)}}
