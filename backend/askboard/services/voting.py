# askboard/services/voting.py
"""
Vote toggling for questions and answers.

Each post keeps two user sets. Voting in the direction the user already
voted withdraws the vote; voting the other way moves the user across.
After every change the persisted vote_count is recomputed from the sets.
"""
from dataclasses import dataclass
from typing import Optional, Union

from askboard.models.answer import Answer
from askboard.models.question import Question
from askboard.models.user import User

UPVOTE = "upvote"
DOWNVOTE = "downvote"
VOTE_TYPES = (UPVOTE, DOWNVOTE)

Votable = Union[Question, Answer]


@dataclass(frozen=True)
class VoteChange:
    add: Optional[str]       # set the user joins, None when withdrawing
    remove: tuple[str, ...]  # sets the user leaves
    result: Optional[str]    # the user's vote afterwards


@dataclass(frozen=True)
class VoteOutcome:
    vote_count: int
    user_vote: Optional[str]
    cast: bool  # True when a new vote was recorded (not a withdrawal)


def plan_vote(vote_type: str, current: Optional[str]) -> VoteChange:
    """Decide set membership changes for a vote, given the user's current vote."""
    if vote_type not in VOTE_TYPES:
        raise ValueError(f"invalid vote type: {vote_type!r}")
    if current == vote_type:
        return VoteChange(add=None, remove=(vote_type,), result=None)
    opposite = DOWNVOTE if vote_type == UPVOTE else UPVOTE
    remove = (opposite,) if current == opposite else ()
    return VoteChange(add=vote_type, remove=remove, result=vote_type)


def _voters(target: Votable, kind: str):
    return target.upvoters if kind == UPVOTE else target.downvoters


async def current_vote(target: Votable, user: User) -> Optional[str]:
    if await target.upvoters.filter(id=user.id).exists():
        return UPVOTE
    if await target.downvoters.filter(id=user.id).exists():
        return DOWNVOTE
    return None


async def recount_votes(target: Votable) -> int:
    return await target.upvoters.all().count() - await target.downvoters.all().count()


async def toggle_vote(target: Votable, user: User, vote_type: str) -> VoteOutcome:
    """
    Apply a vote toggle and persist the recomputed vote_count.

    The membership updates and the counter write are separate statements;
    concurrent votes on the same post resolve as last write wins for the
    counter until the next vote recomputes it.
    """
    change = plan_vote(vote_type, await current_vote(target, user))
    for kind in change.remove:
        await _voters(target, kind).remove(user)
    if change.add:
        await _voters(target, change.add).add(user)

    target.vote_count = await recount_votes(target)
    # Queryset update so a vote does not touch updated_at
    await type(target).filter(id=target.id).update(vote_count=target.vote_count)
    return VoteOutcome(vote_count=target.vote_count, user_vote=change.result, cast=change.add is not None)
