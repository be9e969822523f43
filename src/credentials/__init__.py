"""Credential lookup, Basic-Auth resolution and legacy credential migration."""

from .store import Credential, CredentialLookup, CredentialStore, InMemoryCredentialStore, load_credentials_file
from .resolver import resolve_auth_header, strip_user_info
from .migration import migrate_parameter_config

__all__ = [
    "Credential",
    "CredentialLookup",
    "CredentialStore",
    "InMemoryCredentialStore",
    "load_credentials_file",
    "resolve_auth_header",
    "strip_user_info",
    "migrate_parameter_config",
]
