# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.

import bcrypt

# Compared against when the username does not exist, so a miss costs one bcrypt check too
_DUMMY_HASH = bcrypt.hashpw(b"dummy", bcrypt.gensalt())


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, stored_hash: str = None) -> bool:
    """Timing-attack resistant check; pass ``stored_hash=None`` for unknown users."""
    if stored_hash is None:
        bcrypt.checkpw(password.encode("utf-8"), _DUMMY_HASH)
        return False
    return bcrypt.checkpw(password.encode("utf-8"), stored_hash.encode("utf-8"))
