# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends
from typing import List
from sqlalchemy.orm import Session

from lifelogix.models.database import get_db
from lifelogix.schemas.activity_schemas import ActivityCreateRequest, ActivityUpdateRequest, ActivityResponse
from lifelogix.services.activity_service import activity_repository
from lifelogix.utils.auth_utils import require_identity
from lifelogix.utils.jwt_utils import Identity

router = APIRouter(prefix="/api/activities", tags=["Activities"])


@router.post("", response_model=ActivityResponse)
def create_activity(
    payload: ActivityCreateRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    return activity_repository.create(db, identity, payload.model_dump(exclude_unset=True)).to_dict()


@router.get("", response_model=List[ActivityResponse])
def list_activities(db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    return [activity.to_dict() for activity in activity_repository.list(db, identity)]


@router.get("/{activity_id}", response_model=ActivityResponse)
def get_activity(activity_id: int, db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    return activity_repository.get(db, identity, activity_id).to_dict()


@router.put("/{activity_id}", response_model=ActivityResponse)
def update_activity(
    activity_id: int,
    payload: ActivityUpdateRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    return activity_repository.update(db, identity, activity_id, payload.model_dump(exclude_unset=True)).to_dict()


@router.delete("/{activity_id}")
def delete_activity(activity_id: int, db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    activity_repository.delete(db, identity, activity_id)
    return {"msg": "Activity removed"}
