"""Maven metadata fetcher.

One GET per call, no retries and no cache: metadata is fetched fresh on
every resolution request. Failures never escape; they come back as a
placeholder ``VersioningMetadata`` whose only version is a diagnostic.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, Optional

import requests

from common.http_client import get_text
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from .models import VersioningMetadata
from .parser import parse_metadata

logger = logging.getLogger(__name__)


def fetch_metadata(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    session: Optional[requests.Session] = None,
) -> VersioningMetadata:
    """Fetch and parse one maven-metadata.xml.

    Args:
        url: Absolute metadata URL, without user-info.
        headers: Optional request headers (e.g. the Authorization header).
        session: Optional HTTP transport.

    Returns:
        Parsed metadata, or a failure placeholder.
    """
    if is_debug_enabled(logger):
        logger.debug("Fetching Maven metadata", extra=extra_context(
            event="function_entry", component="fetcher", action="fetch_metadata",
            target=safe_url(url)
        ))

    try:
        text = get_text(url, context="metadata", session=session, headers=headers)
        metadata = parse_metadata(text)
    except (requests.RequestException, ET.ParseError, ValueError) as exc:
        logger.warning(
            "Maven metadata fetch/parse error: %s",
            exc,
            extra=extra_context(
                event="anomaly", component="fetcher", action="fetch_metadata",
                outcome="error", target=safe_url(url)
            )
        )
        return VersioningMetadata.failure(exc)

    if is_debug_enabled(logger):
        logger.debug("Parsed Maven metadata", extra=extra_context(
            event="function_exit", component="fetcher", action="fetch_metadata",
            outcome="success", target=safe_url(url)
        ))
    return metadata
