# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import Header
from typing import Optional
from lifelogix.utils.errors import AuthorizationError
from lifelogix.utils.jwt_utils import Identity, verify_access_token


# ✅ Resource-owner guard
def ensure_owner(resource_owner_id, identity: Identity):
    """Call after the resource was found and before touching it."""
    if not isinstance(resource_owner_id, int) or resource_owner_id != identity.user_id:
        raise AuthorizationError()


def _extract_token(authorization: Optional[str], x_auth_token: Optional[str]) -> Optional[str]:
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer":
            # "Bearer" with nothing after it is the same as no token
            return credentials.strip() or x_auth_token
        # Present but unusable; let verification report it as invalid
        return authorization
    return x_auth_token


# ✅ Dependency to extract the verified identity
def require_identity(
    authorization: Optional[str] = Header(None),
    x_auth_token: Optional[str] = Header(None),
) -> Identity:
    return verify_access_token(_extract_token(authorization, x_auth_token))
