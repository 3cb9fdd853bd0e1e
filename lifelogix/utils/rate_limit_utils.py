# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
from slowapi import Limiter
from slowapi.util import get_remote_address

AUTH_RATE_LIMIT = os.getenv("AUTH_RATE_LIMIT", "10/minute")

limiter = Limiter(
    key_func=get_remote_address,
    enabled=os.getenv("RATE_LIMIT_ENABLED", "true").lower() != "false",
)
