"""Encrypted column helpers and key rotation."""

import pytest
from cryptography.fernet import Fernet

from lifelogix.utils import encryption
from lifelogix.utils.errors import InternalError


class TestDecrypt:

    def test_round_trip(self):
        assert encryption.decrypt(encryption.encrypt("dear diary")) == "dear diary"

    def test_value_from_unknown_key_is_an_internal_error(self):
        foreign = Fernet(Fernet.generate_key()).encrypt(b"dear diary").decode()
        with pytest.raises(InternalError):
            encryption.decrypt(foreign)


class TestKeyRotation:

    def test_previous_key_still_decrypts(self, monkeypatch):
        old_key = Fernet.generate_key().decode()
        written_before_rotation = Fernet(old_key).encrypt(b"old entry").decode()

        rotated = encryption._load_keys(Fernet.generate_key().decode(), f" {old_key} ,")
        monkeypatch.setattr(encryption, "fernet", rotated)

        assert encryption.decrypt(written_before_rotation) == "old entry"

    def test_new_values_use_the_current_key(self, monkeypatch):
        current, old = Fernet.generate_key().decode(), Fernet.generate_key().decode()
        monkeypatch.setattr(encryption, "fernet", encryption._load_keys(current, old))

        assert Fernet(current).decrypt(encryption.encrypt("fresh").encode()) == b"fresh"

    def test_missing_current_key(self):
        with pytest.raises(EnvironmentError):
            encryption._load_keys("", None)

    def test_malformed_key(self):
        with pytest.raises(ValueError):
            encryption._load_keys("not-a-fernet-key")
