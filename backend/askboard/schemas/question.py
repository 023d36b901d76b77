# askboard/schemas/question.py
"""
Pydantic schemas for question, answer and vote endpoints.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from askboard.services.tagging import MAX_TAG_LENGTH, normalize_tags


class QuestionCreateIn(BaseModel):
    """
    Request body for asking a question.
    Title is trimmed before length checks; tags are lowercased and de-duplicated.
    """
    title: str
    description: str = Field(min_length=20)
    tags: list[str]

    @field_validator("title")
    @classmethod
    def _title(cls, value: str) -> str:
        return _check_title(value)

    @field_validator("tags")
    @classmethod
    def _tags(cls, value: list[str]) -> list[str]:
        return _check_tags(value)


class QuestionUpdateIn(BaseModel):
    """Partial update: only provided fields change, with the same rules as creation."""
    title: Optional[str] = None
    description: Optional[str] = Field(default=None, min_length=20)
    tags: Optional[list[str]] = None

    @field_validator("title")
    @classmethod
    def _title(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _check_title(value)

    @field_validator("tags")
    @classmethod
    def _tags(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        return None if value is None else _check_tags(value)


class AnswerCreateIn(BaseModel):
    content: str

    @field_validator("content")
    @classmethod
    def _content(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 5:
            raise ValueError("Answer must be at least 5 characters long")
        return value


class VoteIn(BaseModel):
    voteType: Literal["upvote", "downvote"]


def _check_title(value: str) -> str:
    value = value.strip()
    if len(value) < 10:
        raise ValueError("Title must be at least 10 characters long")
    if len(value) > 200:
        raise ValueError("Title cannot exceed 200 characters")
    return value


def _check_tags(value: list[str]) -> list[str]:
    tags = normalize_tags(value)
    if not tags:
        raise ValueError("At least one tag is required")
    if any(len(tag) > MAX_TAG_LENGTH for tag in tags):
        raise ValueError(f"Tags cannot exceed {MAX_TAG_LENGTH} characters")
    return tags
