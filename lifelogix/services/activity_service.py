# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from lifelogix.models.activity import Activity
from lifelogix.services.resource_repository import OwnedResourceRepository
from lifelogix.utils.errors import ValidationError

MIN_QUALITY = 1
MAX_QUALITY = 5


def _strict_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be a whole number")
    return value


def validate_duration(value) -> int:
    value = _strict_int(value, "durationMinutes")
    if value < 0:
        raise ValidationError("durationMinutes cannot be negative")
    return value


def validate_quality(value) -> int:
    value = _strict_int(value, "quality")
    if not MIN_QUALITY <= value <= MAX_QUALITY:
        raise ValidationError(f"quality must be between {MIN_QUALITY} and {MAX_QUALITY}")
    return value


activity_repository = OwnedResourceRepository(
    Activity,
    label="Activity",
    fields={
        "activityName": "activity_name",
        "durationMinutes": "duration_minutes",
        "quality": "quality",
        "details": "details",
    },
    required=("activityName",),
    validators={
        "activityName": str.strip,
        "durationMinutes": validate_duration,
        "quality": validate_quality,
    },
    defaults={"durationMinutes": lambda: 0},
)
