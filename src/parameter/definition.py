"""Maven metadata parameter definition.

Ties the metadata pieces together: list the versions a user may pick,
work out the default, and turn a chosen version into an
``ArtifactDescriptor`` with a download-ready URL.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import requests

from constants import Constants, DefaultSelection
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from credentials.resolver import resolve_auth_header, strip_user_info
from credentials.store import CredentialLookup
from metadata.fetcher import fetch_metadata
from metadata.models import ArtifactDescriptor, RepositoryCoordinate, VersioningMetadata
from metadata.snapshot import resolve_snapshot
from metadata.urls import artifact_url, metadata_url
from metadata.versions import filter_versions, select_default, sort_versions
from .artifact_info import probe_artifact_info

logger = logging.getLogger(__name__)

SORT_ORDERS = Constants.SORT_ORDERS
_SYMBOLIC_DEFAULTS = frozenset(token.value for token in DefaultSelection)


def check_version_filter(pattern: Optional[str]) -> Optional[str]:
    """Validate a filter regex at configuration time.

    Returns:
        An error message for a non-blank invalid pattern, otherwise None.
    """
    if pattern is None or not pattern.strip():
        return None
    try:
        re.compile(pattern)
    except re.error as exc:
        return f"Not a valid regular expression: {exc}"
    return None


@dataclass(frozen=True)
class MavenMetadataParameter:  # pylint: disable=too-many-instance-attributes
    """Configuration of one "pick a published version" parameter.

    Instances are immutable; use ``dataclasses.replace`` to reconfigure.
    Nothing derived from the fields is cached between calls.
    """
    name: str
    repo_base_url: str
    group_id: str
    artifact_id: str
    description: str = ""
    packaging: str = Constants.DEFAULT_PACKAGING
    classifier: str = ""
    version_filter: str = ""
    sort_order: str = "DESC"
    default_value: str = ""
    max_versions: str = ""
    credentials_id: Optional[str] = None
    current_artifact_info_url: str = ""
    current_artifact_info_label: str = ""
    current_artifact_info_pattern: str = ""

    def __post_init__(self):
        object.__setattr__(self, "repo_base_url", (self.repo_base_url or "").rstrip("/"))

    def coordinate(self) -> RepositoryCoordinate:
        return RepositoryCoordinate(
            base_url=self.repo_base_url,
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            packaging=self.packaging,
            classifier=self.classifier,
        )

    def _request_context(self, credentials: Optional[CredentialLookup]) -> Tuple[RepositoryCoordinate, Dict[str, str]]:
        """Coordinate without user-info plus the single auth header to send."""
        headers = resolve_auth_header(self.repo_base_url, self.credentials_id, credentials)
        coord = self.coordinate()
        request_coord = RepositoryCoordinate(
            base_url=strip_user_info(coord.base_url),
            group_id=coord.group_id,
            artifact_id=coord.artifact_id,
            packaging=coord.packaging,
            classifier=coord.classifier,
        )
        return request_coord, headers

    def fetch_metadata(
        self,
        credentials: Optional[CredentialLookup] = None,
        session: Optional[requests.Session] = None,
    ) -> VersioningMetadata:
        request_coord, headers = self._request_context(credentials)
        return fetch_metadata(metadata_url(request_coord), headers=headers, session=session)

    def _versions_from(self, metadata: VersioningMetadata) -> List[str]:
        if metadata.failed:
            return list(metadata.versions)
        ordered = sort_versions(metadata.versions, self.sort_order)
        return filter_versions(ordered, self.version_filter, self.max_versions)

    def get_versions(
        self,
        credentials: Optional[CredentialLookup] = None,
        session: Optional[requests.Session] = None,
    ) -> List[str]:
        """Versions to offer, sorted, filtered and capped.

        Never empty on failure: a fetch error yields one diagnostic entry.
        """
        versions = self._versions_from(self.fetch_metadata(credentials, session))
        if is_debug_enabled(logger):
            logger.debug("Listed %d versions", len(versions), extra=extra_context(
                event="function_exit", component="parameter", action="get_versions",
                target=safe_url(self.repo_base_url)
            ))
        return versions

    def get_default_version(
        self,
        credentials: Optional[CredentialLookup] = None,
        session: Optional[requests.Session] = None,
    ) -> Optional[str]:
        """Concrete version behind ``default_value``, or None."""
        if not self.default_value or not self.default_value.strip():
            return None
        if self.default_value not in _SYMBOLIC_DEFAULTS:
            return self.default_value
        metadata = self.fetch_metadata(credentials, session)
        if metadata.failed:
            return None
        return select_default(self.default_value, metadata, self._versions_from(metadata))

    def create_value(
        self,
        version: str,
        credentials: Optional[CredentialLookup] = None,
        session: Optional[requests.Session] = None,
    ) -> ArtifactDescriptor:
        """Resolve ``version`` into a descriptor with its download URL."""
        request_coord, headers = self._request_context(credentials)
        resolved = resolve_snapshot(request_coord, version, headers=headers, session=session)
        coord = self.coordinate()
        descriptor = ArtifactDescriptor(
            group_id=coord.group_id,
            artifact_id=coord.artifact_id,
            version=version,
            resolved_version=resolved,
            packaging=coord.packaging,
            classifier=coord.classifier,
            url=artifact_url(coord, version, resolved),
            name=self.name,
            description=self.description,
        )
        logger.info("Resolved %s:%s:%s -> %s", coord.group_id, coord.artifact_id, version, safe_url(descriptor.url))
        return descriptor

    def get_default_value(
        self,
        credentials: Optional[CredentialLookup] = None,
        session: Optional[requests.Session] = None,
    ) -> Optional[ArtifactDescriptor]:
        """Descriptor for the default version, or None when there is none."""
        version = self.get_default_version(credentials, session)
        if version is None:
            return None
        return self.create_value(version, credentials, session)

    def current_artifact_info(self, session: Optional[requests.Session] = None) -> str:
        return probe_artifact_info(
            self.current_artifact_info_url,
            self.current_artifact_info_label,
            self.current_artifact_info_pattern,
            session=session,
        )
