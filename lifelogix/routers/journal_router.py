# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends
from typing import List
from sqlalchemy.orm import Session

from lifelogix.models.database import get_db
from lifelogix.schemas.journal_schemas import EntryCreateRequest, EntryUpdateRequest, EntryResponse
from lifelogix.services.journal_service import entry_repository
from lifelogix.utils.auth_utils import require_identity
from lifelogix.utils.jwt_utils import Identity

router = APIRouter(prefix="/api/entries", tags=["Journal"])


@router.post("", response_model=EntryResponse)
def create_entry(payload: EntryCreateRequest, db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    return entry_repository.create(db, identity, payload.model_dump(exclude_unset=True)).to_dict()


@router.get("", response_model=List[EntryResponse])
def list_entries(db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    return [entry.to_dict() for entry in entry_repository.list(db, identity)]


@router.get("/{entry_id}", response_model=EntryResponse)
def get_entry(entry_id: int, db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    return entry_repository.get(db, identity, entry_id).to_dict()


@router.put("/{entry_id}", response_model=EntryResponse)
def update_entry(
    entry_id: int,
    payload: EntryUpdateRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    return entry_repository.update(db, identity, entry_id, payload.model_dump(exclude_unset=True)).to_dict()


@router.delete("/{entry_id}")
def delete_entry(entry_id: int, db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    entry_repository.delete(db, identity, entry_id)
    return {"msg": "Entry removed"}
