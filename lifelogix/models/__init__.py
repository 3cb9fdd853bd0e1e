# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from .user import User
from .journal import JournalEntry
from .activity import Activity
from .goal import Goal
