# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lifelogix.utils.auth_utils import ensure_owner
from lifelogix.utils.errors import InternalError, NotFoundError, ValidationError
from lifelogix.utils.jwt_utils import Identity

logger = logging.getLogger(__name__)

Validator = Callable[[Any], Any]


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def commit_or_raise(db: Session):
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Commit failed")
        raise InternalError() from e


class OwnedResourceRepository:
    """
    Create/list/get/update/delete for a model whose rows belong to one user.

    ``fields`` maps request keys to model attributes. Only those keys are ever
    written, so ``user_id`` cannot be changed once a row exists. ``validators``
    clean a present value or raise ValidationError; ``defaults`` fill keys a
    create request leaves out.
    """

    def __init__(
        self,
        model,
        label: str,
        fields: Mapping[str, str],
        required: Sequence[str] = (),
        validators: Optional[Mapping[str, Validator]] = None,
        defaults: Optional[Mapping[str, Callable[[], Any]]] = None,
    ):
        self.model = model
        self.label = label
        self.fields = dict(fields)
        self.required = tuple(required)
        self.validators = dict(validators or {})
        self.defaults = dict(defaults or {})

    def _clean(self, key: str, value):
        validator = self.validators.get(key)
        return validator(value) if validator else value

    def load(self, db: Session, identity: Identity, resource_id: int, for_update: bool = False):
        query = db.query(self.model).filter(self.model.id == resource_id)
        if for_update:
            # Fresh copy of the row, locked where the backend supports it
            query = query.with_for_update().populate_existing()
        resource = query.first()
        if resource is None:
            raise NotFoundError(f"{self.label} not found")

        ensure_owner(resource.user_id, identity)
        return resource

    def create(self, db: Session, identity: Identity, data: Dict[str, Any]):
        for key in self.required:
            if is_blank(data.get(key)):
                raise ValidationError(f"{key} is required")

        values = {}
        for key, attr in self.fields.items():
            value = data.get(key)
            if value is None and key in self.defaults:
                value = self.defaults[key]()
            if value is not None:
                value = self._clean(key, value)
            values[attr] = value

        resource = self.model(user_id=identity.user_id, created_at=datetime.utcnow(), **values)
        db.add(resource)
        commit_or_raise(db)
        db.refresh(resource)
        return resource

    def list(self, db: Session, identity: Identity):
        return (
            db.query(self.model)
            .filter(self.model.user_id == identity.user_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .all()
        )

    def get(self, db: Session, identity: Identity, resource_id: int):
        return self.load(db, identity, resource_id)

    def update(self, db: Session, identity: Identity, resource_id: int, data: Dict[str, Any]):
        resource = self.load(db, identity, resource_id, for_update=True)

        # Falsy values (None, "", 0, []) keep what is stored
        changes = {}
        for key, attr in self.fields.items():
            value = data.get(key)
            if not value:
                continue
            if key in self.required and is_blank(value):
                raise ValidationError(f"{key} cannot be blank")
            changes[attr] = self._clean(key, value)

        for attr, value in changes.items():
            setattr(resource, attr, value)

        commit_or_raise(db)
        db.refresh(resource)
        return resource

    def delete(self, db: Session, identity: Identity, resource_id: int):
        resource = self.load(db, identity, resource_id, for_update=True)
        db.delete(resource)
        commit_or_raise(db)
        logger.info("%s %s deleted by user %s", self.label, resource_id, identity.user_id)
