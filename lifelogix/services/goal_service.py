# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import uuid
from datetime import date
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from lifelogix.models.goal import Goal
from lifelogix.services.goal_progress_service import toggled_progress
from lifelogix.services.resource_repository import OwnedResourceRepository, commit_or_raise, is_blank
from lifelogix.utils.errors import NotFoundError, ValidationError
from lifelogix.utils.jwt_utils import Identity

logger = logging.getLogger(__name__)


def parse_target_date(value) -> date:
    if isinstance(value, date):
        return value
    try:
        # Accepts "2025-12-31" as well as full ISO timestamps from browsers
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        raise ValidationError("targetDate must be a date (YYYY-MM-DD)")


def new_sub_goal_id() -> str:
    return uuid.uuid4().hex


def normalize_sub_goal(raw: Dict[str, Any]) -> Dict[str, Any]:
    name = raw.get("subGoalName")
    if is_blank(name):
        raise ValidationError("subGoalName is required")

    progress = raw.get("progress") or 0
    if isinstance(progress, bool) or not isinstance(progress, int) or not 0 <= progress <= 100:
        raise ValidationError("progress must be a whole number between 0 and 100")

    return {
        "id": str(raw.get("id") or new_sub_goal_id()),
        "subGoalName": name,
        "progress": progress,
        "targetDuration": raw.get("targetDuration"),
        "activityType": raw.get("activityType"),
    }


def normalize_sub_goals(raw_list) -> List[Dict[str, Any]]:
    sub_goals = [normalize_sub_goal(dict(raw)) for raw in raw_list]
    ids = [sg["id"] for sg in sub_goals]
    if len(ids) != len(set(ids)):
        raise ValidationError("Sub-goal ids must be unique within a goal")
    return sub_goals


goal_repository = OwnedResourceRepository(
    Goal,
    label="Main Goal",
    fields={
        "goalName": "goal_name",
        "description": "description",
        "targetDate": "target_date",
        "subGoals": "sub_goals",
    },
    required=("goalName", "targetDate"),
    validators={
        "targetDate": parse_target_date,
        "subGoals": normalize_sub_goals,
    },
    defaults={"subGoals": list},
)


def create_goal(db: Session, identity: Identity, data: Dict[str, Any]) -> Goal:
    return goal_repository.create(db, identity, data)


def list_goals(db: Session, identity: Identity) -> List[Goal]:
    return goal_repository.list(db, identity)


def get_goal(db: Session, identity: Identity, goal_id: int) -> Goal:
    return goal_repository.get(db, identity, goal_id)


def update_goal(db: Session, identity: Identity, goal_id: int, data: Dict[str, Any]) -> Goal:
    return goal_repository.update(db, identity, goal_id, data)


def delete_goal(db: Session, identity: Identity, goal_id: int):
    # Sub-goals live inside the row, so they go with it
    goal_repository.delete(db, identity, goal_id)


# ---------------------------------------------------------------- Sub-goals

def _find_index(sub_goals: List[Dict[str, Any]], sub_goal_id: str) -> int:
    for index, sub_goal in enumerate(sub_goals):
        if sub_goal.get("id") == sub_goal_id:
            return index
    raise NotFoundError("Sub-goal not found")


def _load_sub_goals(db: Session, identity: Identity, goal_id: int):
    goal = goal_repository.load(db, identity, goal_id, for_update=True)
    # Work on copies; the new list is assigned back so the change is flushed
    return goal, [dict(sg) for sg in (goal.sub_goals or [])]


def _save(db: Session, goal: Goal, sub_goals: List[Dict[str, Any]]):
    goal.sub_goals = sub_goals
    commit_or_raise(db)


def add_sub_goal(db: Session, identity: Identity, goal_id: int, name: str) -> Dict[str, Any]:
    if is_blank(name):
        raise ValidationError("name is required")

    goal, sub_goals = _load_sub_goals(db, identity, goal_id)
    sub_goal = normalize_sub_goal({"subGoalName": name, "progress": 0})
    sub_goals.append(sub_goal)
    _save(db, goal, sub_goals)
    return sub_goal


def toggle_sub_goal(db: Session, identity: Identity, goal_id: int, sub_goal_id: str) -> Dict[str, Any]:
    goal, sub_goals = _load_sub_goals(db, identity, goal_id)
    index = _find_index(sub_goals, sub_goal_id)

    sub_goals[index]["progress"] = toggled_progress(sub_goals[index].get("progress"))
    _save(db, goal, sub_goals)
    return sub_goals[index]


def rename_sub_goal(db: Session, identity: Identity, goal_id: int, sub_goal_id: str, name: str) -> Dict[str, Any]:
    if is_blank(name):
        raise ValidationError("name is required")

    goal, sub_goals = _load_sub_goals(db, identity, goal_id)
    index = _find_index(sub_goals, sub_goal_id)

    sub_goals[index]["subGoalName"] = name
    _save(db, goal, sub_goals)
    return sub_goals[index]


def delete_sub_goal(db: Session, identity: Identity, goal_id: int, sub_goal_id: str):
    goal, sub_goals = _load_sub_goals(db, identity, goal_id)
    index = _find_index(sub_goals, sub_goal_id)

    del sub_goals[index]
    _save(db, goal, sub_goals)
    logger.info("Sub-goal %s removed from goal %s", sub_goal_id, goal_id)
