# askboard/models/question.py
"""
Database model for questions.

Vote sets are stored as two many-to-many relations to User. The derived
counters (vote_count, answer_count) are persisted so that listing can sort
and filter on them in the database.
"""
import uuid
from tortoise import fields, models


class Question(models.Model):
    """
    Question database model.

    Relationships:
    - Belongs to a User (author)
    - Has many Answers (via related_name="answers" in Answer)
    - Many-to-many with Tag (related_name="questions")
    - Many-to-many with User twice: upvoters and downvoters
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    title = fields.CharField(max_length=200)
    description = fields.TextField()
    author = fields.ForeignKeyField(
        "models.User",
        related_name="questions",
        on_delete=fields.CASCADE,
    )
    tags = fields.ManyToManyField(
        "models.Tag",
        related_name="questions",
        through="question_tags",
    )
    upvoters = fields.ManyToManyField(
        "models.User",
        related_name="upvoted_questions",
        through="question_upvotes",
    )
    downvoters = fields.ManyToManyField(
        "models.User",
        related_name="downvoted_questions",
        through="question_downvotes",
    )
    vote_count = fields.IntField(default=0, index=True)  # len(upvoters) - len(downvoters)
    answer_count = fields.IntField(default=0, index=True)
    view_count = fields.IntField(default=0)
    # Plain column rather than a FK: Answer already points at Question
    accepted_answer_id = fields.UUIDField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True, index=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "questions"
