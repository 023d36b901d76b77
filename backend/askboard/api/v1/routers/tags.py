# askboard/api/v1/routers/tags.py
from fastapi import APIRouter
from tortoise.functions import Count

from askboard.models.tag import Tag

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("")
async def list_tags():
    """
    Get every tag in use with the number of questions carrying it,
    most used first (ties by name). Tags left without questions are skipped.
    """
    rows = await Tag.annotate(question_count=Count("questions")).order_by("name")
    items = [{"name": t.name, "count": t.question_count} for t in rows if t.question_count]
    items.sort(key=lambda item: -item["count"])  # stable: name order kept within a count
    return {"success": True, "data": {"tags": items}}
