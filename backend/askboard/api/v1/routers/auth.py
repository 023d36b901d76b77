# askboard/api/v1/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException, Response, status

from askboard.api.v1.deps import get_current_user
from askboard.api.v1.presenters import user_to_dict
from askboard.core.security import create_access_token, hash_password, verify_password
from askboard.models.user import User
from askboard.schemas.auth import ChangePasswordIn, LoginRequest, RegisterIn

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_token(user: User, response: Response) -> str:
    token = create_access_token(str(user.id), user.role)
    response.set_cookie("accessToken", token, httponly=True, secure=False, samesite="lax")
    return token


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterIn, response: Response):
    """
    Register a new user account and sign it in.

    Username and email must both be unused (email compared case-insensitively).
    The password is hashed before storage.

    Returns:
        dict: success envelope with:
            - user: public user fields
            - accessToken: JWT (also set as the accessToken cookie)

    Raises:
        HTTPException (409): USERNAME_EXISTS / EMAIL_EXISTS
    """
    email = body.email.strip().lower()
    username = body.username.strip()
    if await User.filter(username=username).exists():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                            detail={"code": "USERNAME_EXISTS", "message": "Username already exists"})
    if await User.filter(email=email).exists():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                            detail={"code": "EMAIL_EXISTS", "message": "Email already registered"})
    u = await User.create(
        username=username,
        email=email,
        password_hash=hash_password(body.password),
        role="user",
    )
    token = _issue_token(u, response)
    return {"success": True, "data": {"user": user_to_dict(u), "accessToken": token}}


@router.post("/login")
async def login(payload: LoginRequest, response: Response):
    """
    Authenticate by username or email and create an access token.

    The token is returned in the body and also set as an HttpOnly cookie
    for browser clients.

    Raises:
        HTTPException (401): AUTH_INVALID_CREDENTIALS
    """
    if payload.username:
        user = await User.get_or_none(username=payload.username.strip())
    else:
        user = await User.get_or_none(email=payload.email.strip().lower())
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail={"code": "AUTH_INVALID_CREDENTIALS", "message": "Incorrect credentials"})
    token = _issue_token(user, response)
    return {"success": True, "data": {"user": user_to_dict(user), "accessToken": token}}


@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    """Return the authenticated user's public fields."""
    return {"success": True, "data": user_to_dict(user)}


@router.post("/logout")
async def logout(response: Response):
    """
    Clear the accessToken cookie.

    The JWT itself stays valid until it expires; bearer-header clients
    simply drop it.
    """
    response.delete_cookie("accessToken")
    return {"success": True}


@router.post("/change-password")
async def change_password(body: ChangePasswordIn, user: User = Depends(get_current_user)):
    """
    Change the password of the authenticated user after checking the current one.

    Raises:
        HTTPException (401): AUTH_INVALID_CREDENTIALS when currentPassword is wrong
    """
    if not verify_password(body.currentPassword, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail={"code": "AUTH_INVALID_CREDENTIALS", "message": "Current password is incorrect"})
    user.password_hash = hash_password(body.newPassword)
    await user.save(update_fields=["password_hash"])
    return {"success": True, "data": {"ok": True}}
