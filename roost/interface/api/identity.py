"""Resolve who is making a request."""

from uuid import UUID

from fastapi import Request

from roost.domain.service import JWTService, ViewerIdentity
from roost.domain.value import UserId
from roost.util.jwt import TokenPayload
from roost.util.session import new_anonymous_session_id


def resolve_viewer(
    request: Request,
    jwt_service: JWTService,
    auth_token: str | None,
    session_id: str | None,
) -> ViewerIdentity:
    """Build the viewer identity used for interaction tracking.

    Signed-in viewers are identified by user ID. Everyone also carries a
    session token; viewers without a session cookie get an anonymous one.

    Args:
        request: Incoming request (client address, user agent)
        jwt_service: Verifies the optional auth cookie
        auth_token: JWT token from cookie
        session_id: Session token from cookie

    Returns:
        Viewer identity
    """
    payload = jwt_service.get_payload_from_token(auth_token)
    return ViewerIdentity(
        user_id=_user_id(payload),
        session_id=session_id or new_anonymous_session_id(),
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )


def _user_id(payload: TokenPayload | None) -> UserId | None:
    if payload is None:
        return None
    try:
        return UserId(UUID(payload.user_id))
    except ValueError:
        return None
