"""Cookie-backed login sessions.

The cookie holds a signed JWT whose ``sub`` claim is the user id. Nothing is
stored server side: a token that fails signature or expiry checks is simply
treated as "no session".
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Optional

from fastapi import Request, Response
from jose import JWTError, jwt

from mentorhub.config import settings

logger = logging.getLogger(__name__)


def create_session_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta is None:
        expires_delta = timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS)

    to_encode = {
        "sub": str(user_id),
        "exp": datetime.now(UTC) + expires_delta,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def read_session_token(token: Optional[str]) -> Optional[int]:
    """Return the user id carried by ``token`` or None if it is unusable."""
    if not token:
        return None

    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        logger.debug("Rejected session token: %s", exc)
        return None

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError):
        return None


def get_session_user_id(request: Request) -> Optional[int]:
    return read_session_token(request.cookies.get(settings.SESSION_COOKIE_NAME))


def commit_session(response: Response, user_id: int) -> Response:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(user_id),
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )
    return response


def destroy_session(response: Response) -> Response:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )
    return response
