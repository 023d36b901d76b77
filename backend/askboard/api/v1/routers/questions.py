# askboard/api/v1/routers/questions.py
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from tortoise.expressions import F

from askboard.api.v1.deps import get_current_user, get_optional_user, is_admin
from askboard.api.v1.presenters import answer_to_dict, question_to_dict
from askboard.models.answer import Answer
from askboard.models.question import Question
from askboard.models.user import User
from askboard.schemas.question import QuestionCreateIn, QuestionUpdateIn, VoteIn
from askboard.services import ranking
from askboard.services.notifications import notify_vote_cast
from askboard.services.tagging import resolve_tags
from askboard.services.voting import DOWNVOTE, UPVOTE, current_vote, toggle_vote

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/questions", tags=["questions"])


async def _get_question_or_404(qid: UUID) -> Question:
    q = await Question.get_or_none(id=qid)
    if not q:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QUESTION_NOT_FOUND")
    return q


def _is_owner(q: Question, user: User) -> bool:
    return str(q.author_id) == str(user.id)


@router.get("")
async def list_questions(
    sort: str = Query(ranking.DEFAULT_SORT, alias="filter", description="hot | newest | unanswered | votes"),
    search: str | None = Query(default=None, description="Substring of title, description or tag"),
    tag: str | None = Query(default=None),
    author: UUID | None = Query(default=None, description="Author user id"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=50),
):
    """
    Get a page of questions.

    Args:
        sort: Sort mode (query parameter "filter"); unknown values sort by newest
        search: Case-insensitive match against title, description and tags
        tag: Only questions carrying this tag
        author: Only questions asked by this user
        page: 1-based page number
        limit: Page size (1-50)

    Returns:
        dict: success envelope with:
            - questions: list of question summaries
            - pagination: page, limit, total, pages
    """
    result = await ranking.list_questions(
        sort=sort,
        search=(search or "").strip() or None,
        tag=tag,
        author=author,
        page=page,
        limit=limit,
    )
    return {
        "success": True,
        "data": {
            "questions": [question_to_dict(q) for q in result.questions],
            "pagination": {
                "page": result.page,
                "limit": result.limit,
                "total": result.total,
                "pages": result.pages,
            },
        },
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_question(body: QuestionCreateIn, user: User = Depends(get_current_user)):
    """
    Ask a new question.

    Title, description and at least one tag are required (validated by
    QuestionCreateIn). Tags are stored lowercase and shared across questions.
    """
    q = await Question.create(title=body.title, description=body.description, author=user)
    await q.tags.add(*await resolve_tags(body.tags))
    await q.fetch_related("author", "tags")
    logger.info("[questions] %s asked %s", user.username, q.id)
    return {"success": True, "data": question_to_dict(q)}


@router.get("/{qid}")
async def get_question_detail(qid: UUID, viewer: User | None = Depends(get_optional_user)):
    """
    Get a question with all its answers and count the view.

    Answers are ordered accepted first, then newest. For a signed-in viewer
    the response carries userVote on the question and on every answer.

    Raises:
        HTTPException (404): QUESTION_NOT_FOUND
    """
    if not await Question.filter(id=qid).update(view_count=F("view_count") + 1):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QUESTION_NOT_FOUND")
    q = await _get_question_or_404(qid)
    await q.fetch_related("author", "tags")
    answers = await Answer.filter(question_id=q.id).order_by("-is_accepted", "-created_at").prefetch_related("author")

    up_ids: set[str] = set()
    down_ids: set[str] = set()
    question_vote = None
    if viewer is not None:
        question_vote = await current_vote(q, viewer)
        up_ids = {str(i) for i in await Answer.filter(question_id=q.id, upvoters__id=viewer.id)
                  .values_list("id", flat=True)}
        down_ids = {str(i) for i in await Answer.filter(question_id=q.id, downvoters__id=viewer.id)
                    .values_list("id", flat=True)}

    def _vote_of(a: Answer) -> str | None:
        if str(a.id) in up_ids:
            return UPVOTE
        if str(a.id) in down_ids:
            return DOWNVOTE
        return None

    data = question_to_dict(q)
    data["userVote"] = question_vote
    data["answers"] = [answer_to_dict(a, _vote_of(a)) for a in answers]
    return {"success": True, "data": data}


@router.put("/{qid}")
async def update_question(qid: UUID, body: QuestionUpdateIn, user: User = Depends(get_current_user)):
    """
    Edit a question (author only). Omitted fields keep their value.

    Raises:
        HTTPException (404): QUESTION_NOT_FOUND
        HTTPException (403): FORBIDDEN_NOT_OWNER
    """
    q = await _get_question_or_404(qid)
    if not _is_owner(q, user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="FORBIDDEN_NOT_OWNER")

    # Only the edited columns: counters may have moved since q was loaded
    changed = ["updated_at"]
    if body.title is not None:
        q.title = body.title
        changed.append("title")
    if body.description is not None:
        q.description = body.description
        changed.append("description")
    await q.save(update_fields=changed)
    if body.tags is not None:
        await q.tags.clear()
        await q.tags.add(*await resolve_tags(body.tags))
    await q.fetch_related("author", "tags")
    return {"success": True, "data": question_to_dict(q)}


@router.delete("/{qid}")
async def delete_question(qid: UUID, user: User = Depends(get_current_user)):
    """
    Delete a question and all of its answers (author or admin).

    Raises:
        HTTPException (404): QUESTION_NOT_FOUND
        HTTPException (403): FORBIDDEN_NOT_OWNER
    """
    q = await _get_question_or_404(qid)
    if not _is_owner(q, user) and not is_admin(user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="FORBIDDEN_NOT_OWNER")
    # Answers and tag links first, then the question (FKs cascade, but explicit is clearer)
    await Answer.filter(question_id=q.id).delete()
    await q.tags.clear()
    await q.delete()
    logger.info("[questions] %s deleted %s", user.username, qid)
    return {"success": True, "data": {"id": str(qid), "deleted": True}}


@router.post("/{qid}/vote")
async def vote_question(qid: UUID, body: VoteIn, user: User = Depends(get_current_user)):
    """
    Toggle the caller's vote on a question.

    Returns:
        dict: success envelope with voteCount and userVote (state after the toggle)

    Raises:
        HTTPException (404): QUESTION_NOT_FOUND
        HTTPException (400): CANNOT_VOTE_OWN_POST
    """
    q = await _get_question_or_404(qid)
    if _is_owner(q, user):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="CANNOT_VOTE_OWN_POST")
    outcome = await toggle_vote(q, user, body.voteType)
    if outcome.cast:
        await notify_vote_cast(q, user, body.voteType)
    return {"success": True, "data": {"voteCount": outcome.vote_count, "userVote": outcome.user_vote}}
