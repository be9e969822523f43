"""Shared HTTP helpers used by the metadata fetcher and artifact-info prober.

Encapsulates request/timeout handling and DEBUG tracing so callers only keep
their own fail-soft boundary. This module is dependency-light and can be
imported by metadata/* and parameter/* without cycles.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, redact, safe_url, Timer

logger = logging.getLogger(__name__)


def safe_get(
    url: str,
    *,
    context: str,
    session: Optional[requests.Session] = None,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any,
) -> requests.Response:
    """Perform a single GET request with consistent error logging and DEBUG traces.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "metadata", "artifact-info").
        session: Optional transport; module-level ``requests`` is used when omitted.
        headers: Optional request headers.
        **kwargs: Passed through to ``get``.

    Returns:
        requests.Response: The HTTP response object. The caller owns it and must close it.

    Raises:
        requests.RequestException: On timeout or connection failure.
    """
    safe_target = safe_url(url)
    getter = session.get if session is not None else requests.get
    kwargs.setdefault("timeout", Constants.REQUEST_TIMEOUT)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context
                )
            )
        try:
            res = getter(url, headers=headers, **kwargs)
        except requests.Timeout:
            logger.warning(
                "%s request timed out after %s seconds",
                context,
                kwargs["timeout"],
            )
            raise
        except requests.RequestException as exc:  # includes ConnectionError
            logger.warning("%s connection error: %s", context, redact(str(exc)))
            raise
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success" if res.ok else "handled_non_2xx",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context
                )
            )
        return res


def get_text(
    url: str,
    *,
    context: str,
    session: Optional[requests.Session] = None,
    headers: Optional[Dict[str, str]] = None,
) -> str:
    """GET ``url`` and return its decoded body.

    Non-2xx statuses raise ``requests.HTTPError``. The response is always
    closed before returning or raising.
    """
    res = safe_get(url, context=context, session=session, headers=headers)
    try:
        res.raise_for_status()
        return res.text
    finally:
        res.close()
