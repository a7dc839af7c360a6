# =============================================================================
# Auth API Routes
# =============================================================================
#
# Endpoints:
#   POST /api/auth/login   - Check credentials, open a session (sets cookie)
#   POST /api/auth/logout  - Destroy the session (clears cookie)
#
# =============================================================================

from fastapi import APIRouter, Depends, Request, Response

from hostel.api.dependencies import get_app_settings, get_auth_service
from hostel.api.schemas import LoginRequest, LoginResponse, SuccessResponse, UserResponse
from hostel.auth.context import SessionIdentity
from hostel.auth.policies import get_session_token, require_session
from hostel.auth.service import AuthService
from hostel.config import Settings

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    Authenticate and start a session.
    """
    identity, token = await auth.login(data.role, data.username, data.password)

    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=int(settings.session_ttl.total_seconds()),
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )

    return LoginResponse(
        user=UserResponse(id=identity.id, role=identity.role.value, name=identity.name),
    )


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    request: Request,
    response: Response,
    identity: SessionIdentity = Depends(require_session),
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    End the current session.
    """
    await auth.logout(get_session_token(request))
    response.delete_cookie(settings.session_cookie_name)
    return SuccessResponse()
