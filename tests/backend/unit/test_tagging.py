"""
Unit tests for tag normalization and question body validation.
"""
import pytest
from pydantic import ValidationError

from askboard.schemas.question import AnswerCreateIn, QuestionCreateIn, QuestionUpdateIn
from askboard.services.tagging import normalize_tags


def test_normalize_tags_trims_lowercases_and_dedupes():
    assert normalize_tags(["Python", " python ", "", "API", "  "]) == ["python", "api"]


def test_question_title_is_trimmed():
    body = QuestionCreateIn(
        title="   Why is my loop so slow?   ",
        description="It iterates a million items and takes minutes.",
        tags=["Performance"],
    )
    assert body.title == "Why is my loop so slow?"
    assert body.tags == ["performance"]


@pytest.mark.parametrize("title", ["too short", "x" * 201, "        short      "])
def test_question_title_length_enforced(title):
    with pytest.raises(ValidationError):
        QuestionCreateIn(title=title, description="d" * 20, tags=["python"])


def test_question_requires_description_of_twenty_chars():
    with pytest.raises(ValidationError):
        QuestionCreateIn(title="A perfectly fine title", description="too short", tags=["python"])


def test_question_requires_a_non_blank_tag():
    with pytest.raises(ValidationError):
        QuestionCreateIn(title="A perfectly fine title", description="d" * 20, tags=["  ", ""])


def test_update_allows_partial_body():
    body = QuestionUpdateIn(tags=["Go"])
    assert body.title is None
    assert body.tags == ["go"]


def test_answer_content_trimmed_and_checked():
    assert AnswerCreateIn(content="  use reversed()  ").content == "use reversed()"
    with pytest.raises(ValidationError):
        AnswerCreateIn(content="  ok   ")
