"""Request authentication helpers.

Tokens are accepted from an ``Authorization: Bearer`` header or from the
auth cookie the front end sets. The header wins when both are present.
"""

from fastapi import HTTPException, Request, status

from petal.config import AuthSettings
from petal.domain.service import JWTService
from petal.util.jwt import TokenPayload

BEARER_PREFIX = "bearer "


def extract_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Read the raw token from the request, if any."""
    header = request.headers.get("authorization")
    if header and header.lower().startswith(BEARER_PREFIX):
        return header[len(BEARER_PREFIX) :].strip() or None

    return request.cookies.get(auth_settings.cookie_name)


def get_current_user(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> TokenPayload | None:
    """Decode the caller's token, or None for anonymous callers."""
    return jwt_service.get_payload_from_token(extract_token(request, auth_settings))


def require_user(
    request: Request,
    jwt_service: JWTService,
    auth_settings: AuthSettings,
    detail: str = "Authentication required",
) -> TokenPayload:
    """Decode the caller's token.

    Raises:
        HTTPException: 401 if the token is missing, expired or invalid
    """
    user = get_current_user(request, jwt_service, auth_settings)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def require_moderator(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> TokenPayload:
    """Decode the caller's token and check they may moderate comments.

    Raises:
        HTTPException: 401 if not signed in, 403 if signed in without the admin role
    """
    user = require_user(
        request,
        jwt_service,
        auth_settings,
        detail="Authentication required to moderate comments",
    )
    if not user.role.can_moderate:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


def client_details(request: Request) -> tuple[str, str]:
    """IP address and user agent of the caller."""
    ip_address = request.client.host if request.client else "unknown"
    user_agent = request.headers.get("user-agent", "")
    return ip_address, user_agent
