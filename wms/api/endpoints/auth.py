"""
WMS API — Auth endpoints
POST /auth/login, /auth/refresh, /auth/logout, GET /auth/me
"""
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel, EmailStr
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.deps import CurrentUser, get_db, require_auth
from wms.config import get_settings
from wms.core.security import create_access_token, create_refresh_token, decode_token
from wms.models.rbac import User
from wms.schemas.common import ApiResponse
from wms.services.audit_service import ACTION_USER_LOGIN, log_audit
from wms.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter()
settings = get_settings()


# --- Schemas ---
class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class MeResponse(BaseModel):
    id: UUID
    email: str
    username: str | None
    roles: list[str]


def _set_refresh_cookie(response: Response, user_id: UUID) -> None:
    response.set_cookie(
        key="refresh_token",
        value=create_refresh_token(subject=str(user_id)),
        httponly=True,
        secure=settings.ENVIRONMENT == "production",
        samesite="lax",
        max_age=settings.JWT_REFRESH_TOKEN_TTL_DAYS * 24 * 3600,
    )


async def _issue_tokens(db: AsyncSession, response: Response, user: User) -> TokenResponse:
    roles = await UserService.get_role_slugs(db, user.id)
    access_token = create_access_token(
        subject=str(user.id),
        roles=roles,
        email=user.email,
        username=user.username,
    )
    _set_refresh_cookie(response, user.id)
    return TokenResponse(
        access_token=access_token,
        expires_in=settings.JWT_ACCESS_TOKEN_TTL_MINUTES * 60,
    )


# --- Endpoints ---
@router.post("/login", response_model=ApiResponse[TokenResponse])
async def login(
    body: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Authenticate with email/password. Returns access token. Sets refresh token in httpOnly cookie."""
    user = await UserService.authenticate(db, body.email, body.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    tokens = await _issue_tokens(db, response, user)
    await log_audit(db, user.id, ACTION_USER_LOGIN, "user", user.id)
    await db.commit()
    logger.info("User %s logged in", user.id)
    return ApiResponse(data=tokens, message="Login successful")


@router.post("/refresh", response_model=ApiResponse[TokenResponse])
async def refresh(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Exchange refresh token (from cookie) for new access token."""
    token = request.cookies.get("refresh_token")
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing refresh token")

    payload = decode_token(token)
    if not payload or payload.get("type") != "refresh":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token")

    try:
        user_id = UUID(payload.get("sub") or "")
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    user = await UserService.get_active_user(db, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")

    return ApiResponse(data=await _issue_tokens(db, response, user))


@router.post("/logout", response_model=ApiResponse[None])
async def logout(response: Response):
    """Clear refresh token cookie."""
    response.delete_cookie(key="refresh_token")
    return ApiResponse(message="Logged out")


@router.get("/me", response_model=ApiResponse[MeResponse])
async def me(user: CurrentUser = Depends(require_auth)):
    """Return the current user with role slugs as currently assigned."""
    return ApiResponse(data=MeResponse(id=user.id, email=user.email, username=user.username, roles=user.roles))
