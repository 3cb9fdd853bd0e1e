# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
import math
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from jose.exceptions import JOSEError

from lifelogix.utils.errors import AuthError, AuthReason, SigningError

logger = logging.getLogger(__name__)

# 🔐 Load secret key from environment
if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not SECRET_KEY:
    raise RuntimeError("JWT_SECRET_KEY environment variable is not set.")

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_HOURS = 10


@dataclass(frozen=True)
class Identity:
    """A user id taken from a token whose signature and expiry checked out."""
    user_id: int


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ✅ Function to create a signed JWT token
def create_access_token(user_id: int, now: Optional[datetime] = None) -> str:
    issued_at = now or _utcnow()
    to_encode = {
        "sub": str(user_id),
        "iat": int(issued_at.timestamp()),
        # Rounded up so a token never expires before the full lifetime has passed
        "exp": math.ceil((issued_at + timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS)).timestamp()),
    }
    try:
        return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    except JOSEError as e:
        logger.error("Token signing failed for user %s: %s", user_id, e)
        raise SigningError() from e


# ✅ Function to verify and decode a JWT token
def verify_access_token(token: Optional[str], now: Optional[datetime] = None) -> Identity:
    if not token:
        raise AuthError(AuthReason.missing)

    try:
        # Expiry is checked below against an injectable clock
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM], options={"verify_exp": False})
    except JWTError:
        raise AuthError(AuthReason.invalid)

    exp = payload.get("exp")
    if not isinstance(exp, (int, float)):
        raise AuthError(AuthReason.invalid)
    if (now or _utcnow()).timestamp() > exp:
        raise AuthError(AuthReason.expired)

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise AuthError(AuthReason.invalid)

    return Identity(user_id=user_id)
