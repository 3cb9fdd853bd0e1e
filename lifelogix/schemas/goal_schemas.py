# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import BaseModel
from typing import Optional, List


class SubGoalPayload(BaseModel):
    id: Optional[str] = None
    subGoalName: Optional[str] = None
    progress: Optional[int] = 0
    targetDuration: Optional[int] = None
    activityType: Optional[str] = None


class GoalCreateRequest(BaseModel):
    goalName: Optional[str] = None
    description: Optional[str] = None
    targetDate: Optional[str] = None  # "YYYY-MM-DD"
    subGoals: Optional[List[SubGoalPayload]] = None


class GoalUpdateRequest(GoalCreateRequest):
    pass


class SubGoalNameRequest(BaseModel):
    name: Optional[str] = None


class SubGoalResponse(BaseModel):
    id: str
    subGoalName: str
    progress: int = 0
    targetDuration: Optional[int] = None
    activityType: Optional[str] = None


class GoalResponse(BaseModel):
    id: int
    ownerId: int
    goalName: str
    description: Optional[str] = None
    targetDate: str
    createdAt: Optional[str] = None
    subGoals: List[SubGoalResponse] = []
    overallProgress: int = 0
