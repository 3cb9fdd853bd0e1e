# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
import logging
from sqlalchemy.types import TypeDecorator, Text
from cryptography.fernet import Fernet, InvalidToken, MultiFernet

from lifelogix.utils.errors import InternalError

logger = logging.getLogger(__name__)

# ✅ Optional: load from .env in dev
if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()


def _load_keys(current: str, previous: str = None) -> MultiFernet:
    """
    The current key encrypts; older keys (comma separated) are only tried
    when decrypting, so rows written before a rotation stay readable.
    """
    if not current:
        raise EnvironmentError("FERNET_SECRET is missing. Please set it in your environment or .env file.")

    secrets = [current] + [s.strip() for s in (previous or "").split(",") if s.strip()]
    try:
        return MultiFernet([Fernet(secret) for secret in secrets])
    except ValueError as e:
        raise ValueError("A Fernet secret is invalid. Each must be a 32-byte url-safe base64 string.") from e


# 🔐 Current key plus any retired ones
fernet = _load_keys(os.getenv("FERNET_SECRET"), os.getenv("FERNET_PREVIOUS_SECRETS"))


def encrypt(text: str) -> str:
    return fernet.encrypt(text.encode()).decode()


def decrypt(token: str) -> str:
    try:
        return fernet.decrypt(token.encode()).decode()
    except InvalidToken as e:
        # Wrong or retired-and-dropped key; the stored text cannot be recovered here
        logger.error("Stored value could not be decrypted with any configured key")
        raise InternalError("Stored data could not be decrypted") from e


# 🧩 Text column stored encrypted, read back as plain str
class EncryptedText(TypeDecorator):
    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None:
            return encrypt(value)
        return value

    def process_result_value(self, value, dialect):
        if value is not None:
            return decrypt(value)
        return value
