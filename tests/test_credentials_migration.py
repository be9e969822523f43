"""Tests for the legacy username/password migration."""

from unittest.mock import MagicMock

from constants import Constants
from credentials.migration import credentials_id_for, migrate_parameter_config
from credentials.store import Credential, InMemoryCredentialStore


def _legacy(**overrides):
    config = {
        "repo_base_url": "https://repo.example.com:8081/nexus/content/repositories/releases",
        "group_id": "com.acme",
        "artifact_id": "foo",
        "username": "deployer",
        "password": "s3cret",
    }
    config.update(overrides)
    return config


class TestCredentialsIdFor:
    def test_with_port(self):
        assert credentials_id_for("https://repo.example.com:8081/nexus", "deployer") == \
            "https://deployer@repo.example.com:8081/nexus"

    def test_without_port(self):
        assert credentials_id_for("http://repo.example.com/m2", "u") == "http://u@repo.example.com/m2"

    def test_unparseable_url(self):
        assert credentials_id_for("not a url", "u") == "u@not a url"


class TestMigrateParameterConfig:
    """Test migrate_parameter_config."""

    def test_moves_plaintext_credentials_to_store(self):
        store = InMemoryCredentialStore()
        original = _legacy()

        migrated = migrate_parameter_config(original, store)

        expected_id = "https://deployer@repo.example.com:8081/nexus/content/repositories/releases"
        assert migrated["credentials_id"] == expected_id
        assert store.lookup(expected_id) == Credential("deployer", "s3cret")
        assert "username" not in migrated
        assert "password" not in migrated
        assert migrated["config_version"] == Constants.CONFIG_VERSION
        assert original["username"] == "deployer"

    def test_reuses_existing_credentials(self):
        """A second definition for the same repo and user shares the stored entry."""
        expected_id = "https://deployer@repo.example.com:8081/nexus/content/repositories/releases"
        store = InMemoryCredentialStore({expected_id: Credential("deployer", "older")})

        migrated = migrate_parameter_config(_legacy(), store)

        assert migrated["credentials_id"] == expected_id
        assert store.lookup(expected_id) == Credential("deployer", "older")
        assert len(store) == 1

    def test_existing_credentials_id_kept(self):
        store = InMemoryCredentialStore()

        migrated = migrate_parameter_config(_legacy(credentials_id="nexus"), store)

        assert migrated["credentials_id"] == "nexus"
        assert len(store) == 0
        assert "password" not in migrated

    def test_incomplete_legacy_fields_not_migrated(self):
        store = InMemoryCredentialStore()

        migrated = migrate_parameter_config(_legacy(password=""), store)

        assert migrated.get("credentials_id") is None
        assert len(store) == 0

    def test_store_failure_clears_reference(self, caplog):
        """No reference to a credential that could not be stored survives."""
        store = MagicMock()
        store.lookup.return_value = None
        store.add.side_effect = OSError("read-only store")

        with caplog.at_level("WARNING"):
            migrated = migrate_parameter_config(_legacy(), store)

        assert migrated["credentials_id"] is None
        assert "could not be migrated" in caplog.text

    def test_current_version_untouched(self):
        store = MagicMock()
        config = {"config_version": 2, "repo_base_url": "https://r", "group_id": "g", "artifact_id": "a"}

        migrated = migrate_parameter_config(config, store)

        assert migrated == config
        store.add.assert_not_called()
