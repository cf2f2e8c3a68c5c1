"""Anonymous session tokens."""

from uuid import uuid4

ANONYMOUS_SESSION_PREFIX = "anon_"


def new_anonymous_session_id() -> str:
    """Generate a session token for a viewer without a session cookie.

    Returns:
        Token of the form ``anon_<32 hex chars>``
    """
    return f"{ANONYMOUS_SESSION_PREFIX}{uuid4().hex}"


def is_anonymous_session(session_id: str) -> bool:
    """Check whether a session token was generated by this service."""
    return session_id.startswith(ANONYMOUS_SESSION_PREFIX)
