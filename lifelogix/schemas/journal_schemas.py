# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import BaseModel
from typing import Optional


class EntryCreateRequest(BaseModel):
    title: Optional[str] = None
    text: Optional[str] = None


class EntryUpdateRequest(BaseModel):
    title: Optional[str] = None
    text: Optional[str] = None


class EntryResponse(BaseModel):
    id: int
    ownerId: int
    title: str
    text: str
    createdAt: Optional[str] = None
