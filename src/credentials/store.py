"""Credential values and the lookup capability handed to resolvers.

The core never persists credentials; callers pass in whatever store they
have, as long as it satisfies ``CredentialLookup``.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credential:
    """Username/password pair for Basic authentication.

    ``password`` is None for URL user-info that carries only a user name.
    """
    username: str
    password: Optional[str] = field(default=None, repr=False)


class CredentialLookup(Protocol):
    """Read-only access to stored credentials by id."""

    def lookup(self, credentials_id: str) -> Optional[Credential]:
        ...


class CredentialStore(CredentialLookup, Protocol):
    """Credential lookup that can also record new entries."""

    def add(self, credentials_id: str, credential: Credential) -> None:
        ...


class InMemoryCredentialStore:
    """Dictionary-backed store, used by the CLI and by tests."""

    def __init__(self, entries: Optional[Dict[str, Credential]] = None) -> None:
        self._entries: Dict[str, Credential] = dict(entries or {})

    def lookup(self, credentials_id: str) -> Optional[Credential]:
        if not credentials_id:
            return None
        return self._entries.get(credentials_id)

    def add(self, credentials_id: str, credential: Credential) -> None:
        if not credentials_id or not credentials_id.strip():
            raise ValueError("credentials id must not be blank")
        self._entries[credentials_id] = credential

    def __contains__(self, credentials_id: object) -> bool:
        return credentials_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def load_credentials_file(path: str) -> InMemoryCredentialStore:
    """Build a store from a YAML or JSON mapping ``{id: {username, password}}``.

    Entries without a username are skipped with a warning.

    Raises:
        OSError: When the file cannot be read.
        ValueError: When the document cannot be parsed or is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as fh:
        try:
            if path.lower().endswith(".json"):
                data = json.load(fh) or {}
            else:
                data = yaml.safe_load(fh) or {}
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ValueError(f"Cannot parse credentials file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Credentials file {path} must contain a mapping")

    store = InMemoryCredentialStore()
    for credentials_id, entry in data.items():
        if not isinstance(entry, dict) or not entry.get("username"):
            logger.warning("Skipping credentials entry %s without username", credentials_id)
            continue
        store.add(str(credentials_id), Credential(str(entry["username"]), str(entry.get("password") or "")))
    return store
