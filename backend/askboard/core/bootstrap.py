# askboard/core/bootstrap.py
"""
Bootstrap module for application initialization.
Creates the moderator account on first start so questions can be removed
by someone other than their author.
"""
import logging

from askboard.config import settings
from askboard.core.security import hash_password
from askboard.models.user import User

logger = logging.getLogger("uvicorn.error")


async def ensure_default_admin() -> User | None:
    """
    Create a default admin if none exists and ADMIN_PASSWORD is configured.

    Username and email come from ADMIN_USERNAME / ADMIN_EMAIL. A username
    already held by a regular account gets a numeric suffix (admin2, admin3, ...).
    Returns the created admin, or None when nothing was created.
    """
    if await User.filter(role="admin").exists():
        return None

    if not settings.admin_password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return None

    username = settings.admin_username
    suffix = 1
    while await User.filter(username=username).exists():
        suffix += 1
        username = f"{settings.admin_username}{suffix}"

    if await User.filter(email=settings.admin_email).exists():
        logger.warning("[bootstrap] ADMIN_EMAIL %s already registered -> skip creating default admin.",
                       settings.admin_email)
        return None

    admin = await User.create(
        username=username,
        email=settings.admin_email,
        password_hash=hash_password(settings.admin_password),
        role="admin",
    )
    logger.info("[bootstrap] Created default admin -> username=%s email=%s id=%s",
                admin.username, admin.email, admin.id)
    return admin
