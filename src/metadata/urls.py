"""URL composition for repository metadata and artifact files."""

from typing import Optional

from constants import Constants
from .models import RepositoryCoordinate


def group_path(group_id: str) -> str:
    """Convert a dotted group id into its repository path form."""
    return group_id.replace(".", "/")


def artifact_root_url(coord: RepositoryCoordinate) -> str:
    """``{base}/{group-path}/{artifactId}`` without trailing slash."""
    return f"{coord.base_url}/{group_path(coord.group_id)}/{coord.artifact_id}"


def metadata_url(coord: RepositoryCoordinate, version: Optional[str] = None) -> str:
    """Location of maven-metadata.xml, scoped under ``version`` when given.

    Args:
        coord: Artifact family.
        version: Version directory for the per-version (snapshot) metadata.

    Returns:
        Absolute metadata URL.
    """
    root = artifact_root_url(coord)
    if version:
        return f"{root}/{version}/{Constants.METADATA_FILE}"
    return f"{root}/{Constants.METADATA_FILE}"


def artifact_file_name(coord: RepositoryCoordinate, resolved_version: str) -> str:
    """``{artifactId}-{resolvedVersion}[-{classifier}].{packaging}``."""
    name = f"{coord.artifact_id}-{resolved_version}"
    if coord.classifier:
        name += f"-{coord.classifier}"
    return f"{name}.{coord.packaging}"


def artifact_url(coord: RepositoryCoordinate, version: str, resolved_version: Optional[str] = None) -> str:
    """Download URL of one artifact file.

    The directory uses the requested ``version``; the file name uses the
    snapshot-resolved one, which defaults to ``version``.
    """
    file_name = artifact_file_name(coord, resolved_version or version)
    return f"{artifact_root_url(coord)}/{version}/{file_name}"
