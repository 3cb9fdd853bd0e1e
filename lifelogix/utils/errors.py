# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.

from enum import Enum


class LifeLogixError(Exception):
    """Base class for every error the services raise on purpose.

    The HTTP layer turns these into ``{"msg": ...}`` responses using
    ``status_code``; anything that is not a LifeLogixError becomes a 500.
    """

    status_code = 500
    default_message = "Server Error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(LifeLogixError):
    status_code = 400
    default_message = "Invalid request"


class AuthReason(str, Enum):
    missing = "missing"
    invalid = "invalid"
    expired = "expired"
    invalid_credentials = "invalid_credentials"


_AUTH_MESSAGES = {
    AuthReason.missing: "No token, authorization denied",
    AuthReason.invalid: "Token is not valid",
    AuthReason.expired: "Token has expired",
    AuthReason.invalid_credentials: "Invalid Credentials",
}


class AuthError(LifeLogixError):
    status_code = 401

    def __init__(self, reason: AuthReason, message: str = None):
        self.reason = reason
        super().__init__(message or _AUTH_MESSAGES[reason])


class AuthorizationError(LifeLogixError):
    # Kept at 401 (not 403) for compatibility with existing clients
    status_code = 401
    default_message = "User not authorized"


class NotFoundError(LifeLogixError):
    status_code = 404
    default_message = "Not found"


class InternalError(LifeLogixError):
    status_code = 500


class SigningError(InternalError):
    default_message = "Could not sign token"
