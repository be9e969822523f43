"""Data models for repository coordinates, metadata and resolved artifacts."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from constants import Constants


@dataclass(frozen=True)
class RepositoryCoordinate:
    """One artifact family in one repository.

    Blank packaging is normalised to ``jar``; a blank classifier means no
    classifier segment in artifact file names.
    """
    base_url: str
    group_id: str
    artifact_id: str
    packaging: str = Constants.DEFAULT_PACKAGING
    classifier: str = ""

    def __post_init__(self):
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "base_url", (self.base_url or "").rstrip("/"))
        object.__setattr__(self, "packaging", (self.packaging or "").strip() or Constants.DEFAULT_PACKAGING)
        object.__setattr__(self, "classifier", (self.classifier or "").strip())


@dataclass(frozen=True)
class SnapshotInfo:
    """Timestamped build backing a SNAPSHOT version."""
    timestamp: str = ""
    build_number: str = ""


@dataclass
class VersioningMetadata:
    """Parsed contents of one maven-metadata.xml.

    ``error`` is set when the document could not be fetched or parsed; in that
    case ``versions`` holds a single diagnostic string.
    """
    latest: str = ""
    release: str = ""
    versions: List[str] = field(default_factory=list)
    snapshot: Optional[SnapshotInfo] = None
    error: Optional[str] = None

    @classmethod
    def failure(cls, exc: BaseException) -> "VersioningMetadata":
        """Placeholder metadata carrying a diagnostic for ``exc``."""
        diagnostic = f"<{type(exc).__name__}: {exc}>"
        return cls(versions=[diagnostic], error=diagnostic)

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class ArtifactDescriptor:
    """Resolution outcome handed back to the caller.

    ``version`` is the requested version, ``resolved_version`` the one after
    snapshot resolution, and ``url`` always points at the resolved file.
    ``name`` and ``description`` belong to the collaborator.
    """
    group_id: str
    artifact_id: str
    version: str
    resolved_version: str
    packaging: str
    classifier: str
    url: str
    name: str = ""
    description: str = ""

    def _projection(self) -> Dict[str, Optional[str]]:
        return {
            self.name + Constants.GROUP_ID_SUFFIX: self.group_id,
            self.name + Constants.ARTIFACT_ID_SUFFIX: self.artifact_id,
            self.name + Constants.VERSION_SUFFIX: self.version,
            self.name + Constants.ARTIFACT_URL_SUFFIX: self.url,
            self.name + Constants.PACKAGING_SUFFIX: self.packaging,
            self.name + Constants.CLASSIFIER_SUFFIX: self.classifier,
        }

    def to_env(self) -> Dict[str, str]:
        """Flat ``{name + suffix: value}`` mapping for environment projection."""
        return {key: value or "" for key, value in self._projection().items()}

    def resolve_variable(self, variable: str) -> Optional[str]:
        """Return the value behind one projected key, or None when unknown."""
        if not variable or not variable.strip():
            return None
        return self._projection().get(variable)

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "description": self.description,
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "version": self.version,
            "resolvedVersion": self.resolved_version,
            "packaging": self.packaging,
            "classifier": self.classifier,
            "artifactUrl": self.url,
        }
