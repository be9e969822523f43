"""Probe for the "currently deployed artifact" indicator.

Fetches a free-text page (a status endpoint, a version file, ...) and
extracts a value from it with an optional regex.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

import requests

from constants import Constants
from common.http_client import get_text
from common.logging_utils import extra_context, safe_url

logger = logging.getLogger(__name__)


def _extract(body: str, pattern: Optional[str]) -> str:
    if pattern is None or not pattern.strip():
        return body
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        logger.warning("Invalid artifact info pattern %r ignored: %s", pattern, exc)
        return body
    match = regex.search(body)
    if match is None:
        return body
    if regex.groups:
        return match.group(1) or ""
    return match.group(0)


def probe_artifact_info(
    url: Optional[str],
    label: Optional[str] = None,
    pattern: Optional[str] = None,
    *,
    session: Optional[requests.Session] = None,
) -> str:
    """Return ``"{label}: {value}"`` extracted from the body at ``url``.

    Args:
        url: Page to read; a blank URL yields an empty string.
        label: Prefix; defaults to "Currently used artifact".
        pattern: Searched (not fully matched) against the body. The first
            capturing group is used when the pattern has one, otherwise the
            whole match. No pattern or no match yields the whole body.
        session: Optional HTTP transport.
    """
    if url is None or not url.strip():
        return ""
    label = label if label and label.strip() else Constants.DEFAULT_ARTIFACT_INFO_LABEL

    try:
        body = get_text(url, context="artifact-info", session=session)
    except requests.RequestException as exc:
        logger.warning(
            "Artifact info request failed: %s",
            exc,
            extra=extra_context(
                event="anomaly", component="artifact_info", action="probe",
                outcome="request_failed", target=safe_url(url)
            )
        )
        return f"{label}: {Constants.ARTIFACT_INFO_REQUEST_FAILED}"

    return f"{label}: {_extract(body, pattern)}"
