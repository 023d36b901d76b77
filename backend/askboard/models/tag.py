# askboard/models/tag.py
from tortoise import fields, models


class Tag(models.Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=64, unique=True, index=True)  # Always stored lowercase

    class Meta:
        table = "tags"
