# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from lifelogix.models.database import get_db
from lifelogix.schemas.auth_schemas import (
    RegisterRequest,
    LoginRequest,
    ChangePasswordRequest,
    TokenResponse,
    ProfileResponse,
)
from lifelogix.services import auth_service
from lifelogix.utils.auth_utils import require_identity
from lifelogix.utils.jwt_utils import Identity
from lifelogix.utils.rate_limit_utils import limiter, AUTH_RATE_LIMIT

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_model=TokenResponse)
@limiter.limit(AUTH_RATE_LIMIT)
def register(request: Request, payload: RegisterRequest, db: Session = Depends(get_db)):
    token = auth_service.register_user(db, payload.username, payload.password)
    return {"token": token}


@router.post("/login", response_model=TokenResponse)
@limiter.limit(AUTH_RATE_LIMIT)
def login(request: Request, payload: LoginRequest, db: Session = Depends(get_db)):
    token = auth_service.login_user(db, payload.username, payload.password)
    return {"token": token}


@router.get("/me", response_model=ProfileResponse)
def me(db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    return auth_service.get_profile(db, identity).to_dict()


@router.put("/password")
def change_password(
    payload: ChangePasswordRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    auth_service.change_password(db, identity, payload.currentPassword, payload.newPassword)
    return {"msg": "Password updated"}
