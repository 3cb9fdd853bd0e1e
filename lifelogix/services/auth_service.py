# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lifelogix.models.user import User
from lifelogix.services.resource_repository import commit_or_raise, is_blank
from lifelogix.utils.errors import AuthError, AuthReason, NotFoundError, ValidationError
from lifelogix.utils.jwt_utils import Identity, create_access_token
from lifelogix.utils.password_utils import hash_password, verify_password

logger = logging.getLogger(__name__)


def register_user(db: Session, username: str, password: str) -> str:
    """Stores a new user and returns a token so the client is logged in right away."""
    if is_blank(username) or is_blank(password):
        raise ValidationError("Username and password are required")

    # Exact, case-sensitive match
    if db.query(User).filter(User.username == username).first():
        raise ValidationError("User already exists")

    user = User(username=username, password_hash=hash_password(password), created_at=datetime.utcnow())
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration of the same name
        db.rollback()
        raise ValidationError("User already exists")
    db.refresh(user)

    logger.info("Registered user %s", user.id)
    return create_access_token(user.id)


def login_user(db: Session, username: str, password: str) -> str:
    if is_blank(username) or is_blank(password):
        raise AuthError(AuthReason.invalid_credentials)

    user = db.query(User).filter(User.username == username).first()

    # Same work and same error whether the user or the password is wrong
    if not verify_password(password, user.password_hash if user else None):
        logger.info("Failed login attempt")
        raise AuthError(AuthReason.invalid_credentials)

    return create_access_token(user.id)


def get_profile(db: Session, identity: Identity) -> User:
    user = db.query(User).filter(User.id == identity.user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def change_password(db: Session, identity: Identity, current_password: str, new_password: str):
    """Issued tokens are not revoked; they stay valid until they expire."""
    if is_blank(current_password) or is_blank(new_password):
        raise ValidationError("Current and new password are required")

    user = get_profile(db, identity)
    if not verify_password(current_password, user.password_hash):
        raise AuthError(AuthReason.invalid_credentials)

    user.password_hash = hash_password(new_password)
    commit_or_raise(db)
    logger.info("Password changed for user %s", user.id)
