# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import AliasChoices, BaseModel, Field
from typing import Optional


class ActivityCreateRequest(BaseModel):
    activityName: Optional[str] = None
    # Older clients send the minutes as "duration"
    durationMinutes: Optional[int] = Field(None, validation_alias=AliasChoices("durationMinutes", "duration"))
    quality: Optional[int] = None
    details: Optional[str] = None


class ActivityUpdateRequest(ActivityCreateRequest):
    pass


class ActivityResponse(BaseModel):
    id: int
    ownerId: int
    activityName: str
    durationMinutes: int
    quality: Optional[int] = None
    details: Optional[str] = None
    createdAt: Optional[str] = None
