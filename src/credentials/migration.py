"""Configuration migrations for parameter definitions.

Version 1 definitions stored ``username``/``password`` in plain text.
Version 2 replaces them with a ``credentials_id`` that refers to an entry in
the caller's credential store. Run ``migrate_parameter_config`` once when a
definition is loaded.
"""
from __future__ import annotations

import logging
from typing import Any, Dict
from urllib.parse import urlsplit

from constants import Constants
from common.logging_utils import safe_url
from .store import Credential, CredentialStore

logger = logging.getLogger(__name__)

_LEGACY_FIELDS = ("username", "password")


def credentials_id_for(repo_base_url: str, username: str) -> str:
    """Derive ``scheme://user@host[:port]/path`` as a reusable credentials id.

    Definitions that point at the same repository with the same user end up
    sharing one stored credential. Unparseable URLs fall back to
    ``user@repo_base_url``.
    """
    try:
        parts = urlsplit(repo_base_url)
        port = parts.port
    except ValueError:
        return f"{username}@{repo_base_url}"
    if not parts.scheme or not parts.hostname:
        return f"{username}@{repo_base_url}"
    host = parts.hostname
    if port is not None:
        host = f"{host}:{port}"
    return f"{parts.scheme}://{username}@{host}{parts.path}"


def _migrate_v1_to_v2(config: Dict[str, Any], store: CredentialStore) -> Dict[str, Any]:
    username = config.get("username")
    password = config.get("password")
    if str(config.get("credentials_id") or "").strip() or not username or not password:
        return config

    repo_base_url = str(config.get("repo_base_url") or "")
    credentials_id = credentials_id_for(repo_base_url, username)
    try:
        if store.lookup(credentials_id) is None:
            store.add(credentials_id, Credential(username, password))
    except Exception as exc:  # pylint: disable=broad-exception-caught
        # a reference to credentials that may not exist must not be stored
        logger.warning(
            "Credentials for repo %s and user %s could not be migrated: %s",
            safe_url(repo_base_url), username, exc
        )
        config["credentials_id"] = None
        return config

    config["credentials_id"] = credentials_id
    logger.debug(
        "Migrated user %s and password for %s to stored credentials with ID %s",
        username, safe_url(repo_base_url), credentials_id
    )
    return config


_MIGRATIONS = {
    1: _migrate_v1_to_v2,
}


def migrate_parameter_config(config: Dict[str, Any], store: CredentialStore) -> Dict[str, Any]:
    """Bring a raw parameter definition up to ``Constants.CONFIG_VERSION``.

    Definitions without ``config_version`` are treated as version 1. The
    input mapping is not modified; plaintext credential fields never survive
    in the result.
    """
    migrated = dict(config)
    version = int(migrated.get("config_version") or 1)
    while version < Constants.CONFIG_VERSION:
        migrated = _MIGRATIONS[version](migrated, store)
        version += 1
    for key in _LEGACY_FIELDS:
        migrated.pop(key, None)
    migrated["config_version"] = max(version, Constants.CONFIG_VERSION)
    return migrated
