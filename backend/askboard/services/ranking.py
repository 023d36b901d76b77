# askboard/services/ranking.py
"""
Question listing: search, filter, sort and pagination.

Sort modes:
    hot         hot questions first; each group by votes, answers, newest
    newest      creation time descending
    unanswered  only questions without answers, newest first
    votes       vote count descending, newest first
Any other mode falls back to newest.

"Hot" means created in the last 24 hours with more than 10 net votes or
more than 5 answers. The rule is evaluated in SQL for listing (hot_filter)
and in Python for a single loaded question (is_hot).
"""
import datetime as dt
import uuid
from dataclasses import dataclass

from tortoise import timezone
from tortoise.expressions import Q
from tortoise.queryset import QuerySet

from askboard.models.question import Question

HOT_WINDOW = dt.timedelta(hours=24)
HOT_MIN_VOTES = 10  # strictly greater than
HOT_MIN_ANSWERS = 5  # strictly greater than

SORT_MODES = ("hot", "newest", "unanswered", "votes")
DEFAULT_SORT = "hot"

_ORDERINGS = {
    "hot": ("-vote_count", "-answer_count", "-created_at"),
    "newest": ("-created_at",),
    "unanswered": ("-created_at",),
    "votes": ("-vote_count", "-created_at"),
}


def hot_filter(now: dt.datetime | None = None) -> Q:
    now = now or timezone.now()
    return Q(created_at__gte=now - HOT_WINDOW) & (
        Q(vote_count__gt=HOT_MIN_VOTES) | Q(answer_count__gt=HOT_MIN_ANSWERS)
    )


def _aware(value: dt.datetime) -> dt.datetime:
    # naive values are UTC, as stored by the ORM
    return value if value.tzinfo else value.replace(tzinfo=dt.timezone.utc)


def is_hot(created_at: dt.datetime, vote_count: int, answer_count: int,
           now: dt.datetime | None = None) -> bool:
    now = now or timezone.now()
    if _aware(created_at) < _aware(now) - HOT_WINDOW:
        return False
    return vote_count > HOT_MIN_VOTES or answer_count > HOT_MIN_ANSWERS


def question_is_hot(question: Question, now: dt.datetime | None = None) -> bool:
    return is_hot(question.created_at, question.vote_count, question.answer_count, now)


@dataclass
class QuestionPage:
    questions: list[Question]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        return -(-self.total // self.limit) if self.total else 0


async def search_filter(search: str) -> Q:
    """
    Case-insensitive substring match on title, description or any tag name.
    Tag hits are resolved to ids first so the main query never joins tags
    (a join would repeat a question once per matching tag).
    """
    tagged_ids = await Question.filter(tags__name__icontains=search).values_list("id", flat=True)
    return Q(title__icontains=search) | Q(description__icontains=search) | Q(id__in=list(tagged_ids))


async def build_base_query(search: str | None = None, tag: str | None = None,
                           author: uuid.UUID | str | None = None) -> QuerySet[Question]:
    qs = Question.all()
    if search:
        qs = qs.filter(await search_filter(search))
    if tag:
        tagged_ids = await Question.filter(tags__name=tag.strip().lower()).values_list("id", flat=True)
        qs = qs.filter(id__in=list(tagged_ids))
    if author:
        qs = qs.filter(author_id=author)
    return qs


async def list_questions(
    sort: str = DEFAULT_SORT,
    search: str | None = None,
    tag: str | None = None,
    author: uuid.UUID | str | None = None,
    page: int = 1,
    limit: int = 10,
    now: dt.datetime | None = None,
) -> QuestionPage:
    """
    Return one page of questions for the listing endpoint.
    total counts the same filtered set that is paged (unanswered included).
    Author and tags are prefetched for serialization.
    """
    if sort not in SORT_MODES:
        sort = "newest"
    offset = (page - 1) * limit
    qs = await build_base_query(search=search, tag=tag, author=author)
    if sort == "unanswered":
        qs = qs.filter(answer_count=0)

    ordering = _ORDERINGS[sort]
    total = await qs.count()

    if sort != "hot":
        rows = await qs.order_by(*ordering).offset(offset).limit(limit).prefetch_related("author", "tags")
        return QuestionPage(questions=list(rows), page=page, limit=limit, total=total)

    # Hot questions form the head of the ordering; the page may straddle both groups.
    cond = hot_filter(now)
    hot_qs = qs.filter(cond)
    hot_total = await hot_qs.count()
    rows: list[Question] = []
    if offset < hot_total:
        rows.extend(await hot_qs.order_by(*ordering).offset(offset).limit(limit)
                    .prefetch_related("author", "tags"))
    remaining = limit - len(rows)
    if remaining > 0:
        rows.extend(await qs.exclude(cond).order_by(*ordering)
                    .offset(max(0, offset - hot_total)).limit(remaining)
                    .prefetch_related("author", "tags"))
    return QuestionPage(questions=rows, page=page, limit=limit, total=total)
