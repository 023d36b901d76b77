# askboard/services/tagging.py
"""
Tag normalization and lookup.
Tags are stored once per lowercase name and shared between questions.
"""
from typing import Iterable

from askboard.models.tag import Tag

MAX_TAG_LENGTH = 64


def normalize_tags(raw: Iterable[str]) -> list[str]:
    """
    Trim and lowercase tag names, dropping blanks and duplicates.
    First occurrence order is kept: ["Python", " python ", "", "API"] -> ["python", "api"].
    """
    seen: list[str] = []
    for name in raw:
        name = (name or "").strip().lower()
        if name and name not in seen:
            seen.append(name)
    return seen


async def resolve_tags(names: Iterable[str]) -> list[Tag]:
    """Return Tag rows for already-normalized names, creating missing ones."""
    tags = []
    for name in names:
        tag, _ = await Tag.get_or_create(name=name)
        tags.append(tag)
    return tags
