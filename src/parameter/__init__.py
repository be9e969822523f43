"""Maven metadata parameter definition and current-artifact probe."""

from .artifact_info import probe_artifact_info
from .definition import SORT_ORDERS, MavenMetadataParameter, check_version_filter

__all__ = [
    "MavenMetadataParameter",
    "SORT_ORDERS",
    "check_version_filter",
    "probe_artifact_info",
]
