"""Login, logout and session-status endpoints for the single admin account.

The session token travels in an HTTP-only cookie; expired and unknown
tokens are reported identically.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from blog.application.schemas import (
    AuthUserResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SessionStatusResponse,
)
from blog.application.services import SessionOptions, SessionService, verify_credentials
from blog.config import Settings
from blog.infrastructure.dependencies import get_app_settings, get_session_service

router = APIRouter(prefix="/auth", tags=["Auth"])

security_logger = logging.getLogger("security.admin_auth")


def get_client_ip(request: Request, settings: Settings) -> str | None:
    """Peer address, or the forwarded client address when the peer is a trusted proxy."""
    peer = request.client.host if request.client else None
    if peer and peer in settings.trusted_proxies:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            # First entry of X-Forwarded-For is the client
            return forwarded.split(",")[0].strip()
        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip.strip()
    return peer


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    request: Request,
    response: Response,
    sessions: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    """Check the admin credentials and open a session."""
    client_ip = get_client_ip(request, settings)
    if not verify_credentials(data.name, data.password, settings):
        security_logger.warning(
            "Admin login failed: invalid credentials",
            extra={"event": "login_failure", "client_ip": client_ip},
        )
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    session_id = await sessions.create(
        settings.admin_user_id,
        SessionOptions(
            ip_address=client_ip,
            user_agent=request.headers.get("user-agent"),
            expiration_hours=settings.session_lifetime_hours,
        ),
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session_id,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        max_age=int(settings.session_lifetime_hours * 3600),
        path="/",
    )
    security_logger.info(
        "Admin login successful",
        extra={"event": "login_success", "client_ip": client_ip},
    )
    return LoginResponse(
        user=AuthUserResponse(name=settings.admin_display_name, role="admin"),
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    request: Request,
    response: Response,
    sessions: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_app_settings),
) -> LogoutResponse:
    """Destroy the server-side session (if any) and clear the cookie."""
    session_id = request.cookies.get(settings.session_cookie_name)
    if session_id:
        await sessions.delete(session_id)
        security_logger.info(
            "Admin logout",
            extra={"event": "logout", "client_ip": get_client_ip(request, settings)},
        )

    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
    )
    return LogoutResponse()


@router.get("/session", response_model=SessionStatusResponse)
async def session_status(
    request: Request,
    sessions: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_app_settings),
) -> SessionStatusResponse:
    """Report whether the request carries a live admin session."""
    info = await sessions.describe(request.cookies.get(settings.session_cookie_name))
    if info is None:
        return SessionStatusResponse(authenticated=False, message="No active session")
    return SessionStatusResponse(
        authenticated=True,
        message="Session valid",
        user=AuthUserResponse.model_validate(info.user, from_attributes=True),
        expires_at=info.expires_at,
    )
