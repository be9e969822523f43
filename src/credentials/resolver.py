"""Basic-Auth header resolution.

A repository URL may embed ``user:pass@host`` and a parameter may also
reference a stored credential. Only one Authorization header is ever
produced: the stored credential wins over URL user-info.
"""
from __future__ import annotations

import base64
import logging
from typing import Dict, Optional
from urllib.parse import unquote, urlsplit, urlunsplit

from common.logging_utils import extra_context, is_debug_enabled
from .store import Credential, CredentialLookup

logger = logging.getLogger(__name__)


def basic_auth_header(credential: Credential) -> Dict[str, str]:
    """``{"Authorization": "Basic <base64(user:pass)>"}`` for ``credential``.

    Without a password only the user name is encoded, as written in the URL.
    """
    if credential.password is None:
        token = credential.username.encode("utf-8")
    else:
        token = f"{credential.username}:{credential.password}".encode("utf-8")
    return {"Authorization": "Basic " + base64.b64encode(token).decode("ascii")}


def credential_from_url(url: str) -> Optional[Credential]:
    """Credential embedded in the URL's user-info, if any."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if parts.username is None:
        return None
    password = None if parts.password is None else unquote(parts.password)
    return Credential(unquote(parts.username), password)


def strip_user_info(url: str) -> str:
    """Return ``url`` without its user-info segment."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    if "@" not in parts.netloc:
        return url
    host = parts.netloc.rsplit("@", 1)[1]
    return urlunsplit((parts.scheme, host, parts.path, parts.query, parts.fragment))


def resolve_credential(
    url: str,
    credentials_id: Optional[str] = None,
    lookup: Optional[CredentialLookup] = None,
) -> Optional[Credential]:
    """Pick the credential for a request to ``url``.

    Precedence: stored credential referenced by ``credentials_id``, then URL
    user-info, then none. An id that the lookup cannot resolve falls through
    to the URL.
    """
    if credentials_id and credentials_id.strip() and lookup is not None:
        stored = lookup.lookup(credentials_id)
        if stored is not None:
            return stored
        logger.warning(
            "Credentials %s not found, falling back to URL user-info",
            credentials_id,
            extra=extra_context(event="anomaly", component="credentials", action="lookup", outcome="missing")
        )
    embedded = credential_from_url(url)
    if embedded is not None and is_debug_enabled(logger):
        logger.debug("Using credentials from URL user-info", extra=extra_context(
            event="decision", component="credentials", action="resolve", outcome="url_user_info"
        ))
    return embedded


def resolve_auth_header(
    url: str,
    credentials_id: Optional[str] = None,
    lookup: Optional[CredentialLookup] = None,
) -> Dict[str, str]:
    """Headers to send with a request to ``url``; empty when anonymous."""
    credential = resolve_credential(url, credentials_id, lookup)
    if credential is None:
        return {}
    return basic_auth_header(credential)
