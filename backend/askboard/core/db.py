# askboard/core/db.py
"""
Database configuration and initialization module.
Handles Tortoise ORM setup, database connection, and migration configuration.
"""
from tortoise import Tortoise

from askboard.config import settings

DB_URL = settings.database_url

# Tortoise ORM configuration dictionary
# Also read by Aerich for migrations (see [tool.aerich] in pyproject.toml)
TORTOISE_ORM = {
    "connections": {"default": DB_URL},
    "apps": {
        "models": {
            "models": [
                "askboard.models.user",
                "askboard.models.tag",
                "askboard.models.question",
                "askboard.models.answer",
                "askboard.models.notification",
                "aerich.models",  # Required: Let Aerich manage migration tables
            ],
            "default_connection": "default",
        },
    },
}


async def init_db():
    """
    Initialize Tortoise ORM database connection.

    Called during application startup. Tables are managed by Aerich
    migrations, so schemas are not generated here.
    """
    await Tortoise.init(config=TORTOISE_ORM)


async def close_db():
    """Close all database connections on application shutdown."""
    await Tortoise.close_connections()
