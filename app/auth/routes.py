# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Sign-in and sign-out for the admin console.
#
# Sign-in exchanges email/password for a Supabase session and stores the
# access token in an httponly cookie. Every other route reads that cookie
# per request; see app/auth/dependencies.py.
# =============================================================================

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse, RedirectResponse

from app.auth.dependencies import SessionProviderDep
from app.auth.models import AuthUser, LoginRequest, LoginResponse
from app.config import settings
from app.exceptions import AuthenticationError
from lib.api_client import SessionExpired, SessionExpiredError
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get("/login")
async def login_page() -> dict:
    """
    Landing point after a redirect on session expiry.

    Tells the caller how to sign in.
    """
    return {
        "detail": "Sign in required",
        "login": {"method": "POST", "path": settings.LOGIN_PATH, "fields": ["email", "password"]},
    }


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest) -> JSONResponse:
    """
    Sign in with email and password.

    Raises:
        401: If Supabase rejects the credentials
    """
    client = SupabaseClient.create_anon_client()

    try:
        result = client.auth.sign_in_with_password(
            {"email": credentials.email, "password": credentials.password}
        )
    except Exception as e:
        logger.warning(f"Sign-in failed for {credentials.email}: {e}")
        raise AuthenticationError(str(e))

    session = result.session
    if session is None or result.user is None:
        raise AuthenticationError("no session returned")

    expires_at = None
    if session.expires_at:
        expires_at = datetime.fromtimestamp(session.expires_at, tz=timezone.utc)

    body = LoginResponse(
        user=AuthUser(id=result.user.id, email=result.user.email),
        expires_at=expires_at,
    )
    response = JSONResponse(content=body.model_dump(mode="json"))
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        session.access_token,
        max_age=session.expires_in,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )

    logger.info(f"Signed in: {result.user.email}")
    return response


@router.post("/logout")
def logout(provider: SessionProviderDep) -> RedirectResponse:
    """Sign out and send the browser back to the login page."""
    provider.sign_out()

    response = RedirectResponse(url=settings.LOGIN_PATH, status_code=303)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response


@router.get("/me", response_model=AuthUser)
def current_user(provider: SessionProviderDep) -> AuthUser:
    """
    Return the signed-in admin.

    An absent or rejected token ends the session like any other 401.
    """
    token = provider.get_access_token()

    try:
        if token is None:
            raise ValueError("no session token")
        user = SupabaseClient.get_client().auth.get_user(token).user
        if user is None:
            raise ValueError("token resolved to no user")
    except Exception as e:
        logger.warning(f"Could not resolve current user: {e}")
        provider.sign_out()
        raise SessionExpiredError(
            SessionExpired(method="GET", path="/auth/me", redirect_to=settings.LOGIN_PATH)
        )

    return AuthUser(id=user.id, email=user.email)
