# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends
from typing import List
from sqlalchemy.orm import Session

from lifelogix.models.database import get_db
from lifelogix.schemas.goal_schemas import (
    GoalCreateRequest,
    GoalUpdateRequest,
    GoalResponse,
    SubGoalNameRequest,
    SubGoalResponse,
)
from lifelogix.services import goal_service
from lifelogix.utils.auth_utils import require_identity
from lifelogix.utils.jwt_utils import Identity

router = APIRouter(prefix="/api/goals", tags=["Goals"])


@router.post("", response_model=GoalResponse)
def create_goal(payload: GoalCreateRequest, db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    return goal_service.create_goal(db, identity, payload.model_dump(exclude_unset=True)).to_dict()


@router.get("", response_model=List[GoalResponse])
def list_goals(db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    return [goal.to_dict() for goal in goal_service.list_goals(db, identity)]


@router.get("/{goal_id}", response_model=GoalResponse)
def get_goal(goal_id: int, db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    return goal_service.get_goal(db, identity, goal_id).to_dict()


@router.put("/{goal_id}", response_model=GoalResponse)
def update_goal(
    goal_id: int,
    payload: GoalUpdateRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    return goal_service.update_goal(db, identity, goal_id, payload.model_dump(exclude_unset=True)).to_dict()


@router.delete("/{goal_id}")
def delete_goal(goal_id: int, db: Session = Depends(get_db), identity: Identity = Depends(require_identity)):
    goal_service.delete_goal(db, identity, goal_id)
    return {"msg": "Goal removed successfully"}


# -------------------------------------------------------------------- Sub-goals

@router.post("/{goal_id}/subgoals", response_model=SubGoalResponse)
def add_sub_goal(
    goal_id: int,
    payload: SubGoalNameRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    return goal_service.add_sub_goal(db, identity, goal_id, payload.name)


@router.put("/{goal_id}/subgoals/{sub_goal_id}/toggle", response_model=SubGoalResponse)
def toggle_sub_goal(
    goal_id: int,
    sub_goal_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    return goal_service.toggle_sub_goal(db, identity, goal_id, sub_goal_id)


@router.put("/{goal_id}/subgoals/{sub_goal_id}", response_model=SubGoalResponse)
def rename_sub_goal(
    goal_id: int,
    sub_goal_id: str,
    payload: SubGoalNameRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    return goal_service.rename_sub_goal(db, identity, goal_id, sub_goal_id, payload.name)


@router.delete("/{goal_id}/subgoals/{sub_goal_id}")
def delete_sub_goal(
    goal_id: int,
    sub_goal_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    goal_service.delete_sub_goal(db, identity, goal_id, sub_goal_id)
    return {"msg": "Sub-goal removed successfully"}
