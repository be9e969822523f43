"""Maven repository metadata package.

- models.py: coordinates, parsed metadata and resolved artifact descriptors
- parser.py: maven-metadata.xml and coordinate token parsing
- fetcher.py: fail-soft metadata download
- versions.py: ordering, filtering and default selection
- snapshot.py: SNAPSHOT to timestamped build resolution
- urls.py: metadata and artifact URL composition
"""

from .models import ArtifactDescriptor, RepositoryCoordinate, SnapshotInfo, VersioningMetadata
from .fetcher import fetch_metadata
from .snapshot import is_snapshot, resolve_snapshot
from .urls import artifact_url, metadata_url
from .versions import filter_versions, select_default, sort_versions

__all__ = [
    "ArtifactDescriptor",
    "RepositoryCoordinate",
    "SnapshotInfo",
    "VersioningMetadata",
    "fetch_metadata",
    "is_snapshot",
    "resolve_snapshot",
    "artifact_url",
    "metadata_url",
    "filter_versions",
    "select_default",
    "sort_versions",
]
