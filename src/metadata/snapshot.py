"""Resolution of SNAPSHOT versions to their timestamped build."""
from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from .fetcher import fetch_metadata
from .models import RepositoryCoordinate
from .urls import metadata_url

logger = logging.getLogger(__name__)


def is_snapshot(version: Optional[str]) -> bool:
    return bool(version) and Constants.SNAPSHOT_MARKER in version


def resolve_snapshot(
    coord: RepositoryCoordinate,
    version: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """Replace ``SNAPSHOT`` in ``version`` with ``{timestamp}-{buildNumber}``.

    Reads the metadata under ``{base}/{group}/{artifact}/{version}/``. Any
    failure, or metadata without a snapshot timestamp, returns ``version``
    unchanged. Non-snapshot versions are returned untouched without a fetch.

    Args:
        coord: Artifact family; ``base_url`` must not carry user-info.
        version: Requested version, e.g. ``3.8-SNAPSHOT``.
        headers: Optional request headers.
        session: Optional HTTP transport.

    Returns:
        e.g. ``3.8-20140919.030038-76``.
    """
    if not is_snapshot(version):
        return version

    metadata = fetch_metadata(metadata_url(coord, version), headers=headers, session=session)
    snapshot = metadata.snapshot
    if metadata.failed or snapshot is None or not snapshot.timestamp.strip():
        if is_debug_enabled(logger):
            logger.debug("No timestamped snapshot, keeping version", extra=extra_context(
                event="function_exit", component="snapshot", action="resolve_snapshot",
                outcome="unchanged"
            ))
        return version

    resolved = version.replace(Constants.SNAPSHOT_MARKER, "") + snapshot.timestamp + "-" + snapshot.build_number
    if is_debug_enabled(logger):
        logger.debug("Resolved snapshot %s -> %s", version, resolved, extra=extra_context(
            event="function_exit", component="snapshot", action="resolve_snapshot",
            outcome="resolved"
        ))
    return resolved
