from fastapi import Header, HTTPException, Request, status
from askboard.core.security import decode_access_token
from askboard.models.user import User


def _extract_token(request: Request, authorization: str | None) -> str | None:
    # 1) Authorization: Bearer xxx
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
        if token:
            return token
    # 2) HttpOnly cookie set by /auth/login
    return request.cookies.get("accessToken")


async def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> User:
    """
    FastAPI dependency returning the authenticated user.

    The JWT is read from the Authorization header (preferred) or the
    accessToken cookie.

    Raises:
        HTTPException (401): AUTH_REQUIRED when no token is sent
        HTTPException (401): AUTH_INVALID_TOKEN when the token is invalid or expired
        HTTPException (401): AUTH_USER_NOT_FOUND when the user no longer exists
    """
    token = _extract_token(request, authorization)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_REQUIRED")

    try:
        payload = decode_access_token(token)
        user_id: str = payload.get("sub")
    except Exception:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_INVALID_TOKEN")

    user = await User.get_or_none(id=user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_USER_NOT_FOUND")
    return user


async def get_optional_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> User | None:
    """
    Like get_current_user, but anonymous or invalid credentials give None.
    Used by public reads that add per-viewer fields when a user is known.
    """
    try:
        return await get_current_user(request, authorization)
    except HTTPException:
        return None


def is_admin(user: User) -> bool:
    return getattr(user, "role", "user") == "admin"
