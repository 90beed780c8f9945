from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from chapterhub.domain.actor import Actor
from config import ApplicationConfig


def create_access_token(actor: Actor, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create JWT access token carrying the actor descriptor

    Args:
        actor: user_id, role and optional state/city anchor
        expires_delta: Token lifetime, JWT_EXPIRE_MINUTES by default

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    expires_delta = expires_delta or timedelta(minutes=ApplicationConfig.JWT_EXPIRE_MINUTES)
    payload = {
        **actor.to_claims(),
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"])
        return payload
    except JWTError:
        return None
