# askboard/models/answer.py
import uuid
from tortoise import fields, models


class Answer(models.Model):
    """
    Answer database model.

    At most one answer per question has is_accepted=True; the accept route
    clears the flag on siblings before setting it.
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    question = fields.ForeignKeyField(
        "models.Question",
        related_name="answers",
        on_delete=fields.CASCADE,
    )
    author = fields.ForeignKeyField(
        "models.User",
        related_name="answers",
        on_delete=fields.CASCADE,
    )
    content = fields.TextField()
    upvoters = fields.ManyToManyField(
        "models.User",
        related_name="upvoted_answers",
        through="answer_upvotes",
    )
    downvoters = fields.ManyToManyField(
        "models.User",
        related_name="downvoted_answers",
        through="answer_downvotes",
    )
    vote_count = fields.IntField(default=0)
    is_accepted = fields.BooleanField(default=False)
    created_at = fields.DatetimeField(auto_now_add=True, index=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "answers"
