# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from lifelogix.models.journal import JournalEntry
from lifelogix.services.resource_repository import OwnedResourceRepository

entry_repository = OwnedResourceRepository(
    JournalEntry,
    label="Entry",
    fields={"title": "title", "text": "text"},
    required=("title", "text"),
)
