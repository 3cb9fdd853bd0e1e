"""Owner guard and token extraction."""

import pytest

from lifelogix.utils.auth_utils import ensure_owner, require_identity
from lifelogix.utils.errors import AuthError, AuthorizationError, AuthReason
from lifelogix.utils.jwt_utils import Identity, create_access_token


class TestEnsureOwner:

    def test_owner_passes(self):
        ensure_owner(3, Identity(user_id=3))

    @pytest.mark.parametrize("owner_id", [4, None, "3", 3.0])
    def test_anything_but_the_same_id_fails(self, owner_id):
        with pytest.raises(AuthorizationError):
            ensure_owner(owner_id, Identity(user_id=3))


class TestRequireIdentity:

    def test_bearer_header(self):
        token = create_access_token(9)
        assert require_identity(authorization=f"Bearer {token}", x_auth_token=None).user_id == 9

    def test_legacy_header(self):
        token = create_access_token(9)
        assert require_identity(authorization=None, x_auth_token=token).user_id == 9

    def test_no_header_at_all(self):
        with pytest.raises(AuthError) as exc:
            require_identity(authorization=None, x_auth_token=None)
        assert exc.value.reason == AuthReason.missing

    def test_wrong_scheme_is_invalid(self):
        token = create_access_token(9)
        with pytest.raises(AuthError) as exc:
            require_identity(authorization=f"Basic {token}", x_auth_token=None)
        assert exc.value.reason == AuthReason.invalid

    @pytest.mark.parametrize("authorization", ["Bearer ", "Bearer", "bearer    "])
    def test_empty_bearer_counts_as_missing(self, authorization):
        with pytest.raises(AuthError) as exc:
            require_identity(authorization=authorization, x_auth_token=None)
        assert exc.value.reason == AuthReason.missing
